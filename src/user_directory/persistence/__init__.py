"""SQLAlchemy-backed persistence for the user directory."""

from .engine import create_engine, create_schema
from .exceptions import (
    QueryExecutionError,
    SessionManagementError,
    SQLAlchemyPersistenceError,
    StoreUnavailableError,
    UnitOfWorkError,
)
from .models import Base, UserModel
from .repository import SQLAlchemyRepository
from .uow import SQLAlchemyUnitOfWork

__all__ = [
    "Base",
    "UserModel",
    "create_engine",
    "create_schema",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
    "SQLAlchemyPersistenceError",
    "SessionManagementError",
    "UnitOfWorkError",
    "StoreUnavailableError",
    "QueryExecutionError",
]
