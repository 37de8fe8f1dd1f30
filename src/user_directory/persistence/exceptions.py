"""Exceptions for the SQLAlchemy persistence layer."""

from __future__ import annotations

from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)

from ..primitives.exceptions import (
    PersistenceError,
    QueryExecutionError,
    StoreUnavailableError,
)


class SQLAlchemyPersistenceError(PersistenceError):
    """Base exception for all SQLAlchemy-specific persistence errors."""


class SessionManagementError(SQLAlchemyPersistenceError):
    """Raised when session creation or management fails."""


class UnitOfWorkError(SQLAlchemyPersistenceError):
    """Raised when Unit of Work operations fail."""


_UNAVAILABLE = (OperationalError, InterfaceError, DisconnectionError)


def translate_error(exc: SQLAlchemyError, action: str) -> PersistenceError:
    """Map a driver-level failure onto the package's persistence errors.

    Connectivity problems become ``StoreUnavailableError``; everything else
    becomes ``QueryExecutionError``. The caller re-raises ``from exc``.
    """
    if isinstance(exc, _UNAVAILABLE):
        return StoreUnavailableError(f"Store unavailable during {action}: {exc}")
    return QueryExecutionError(f"Query failed during {action}: {exc}")


__all__: list[str] = [
    "QueryExecutionError",
    "SessionManagementError",
    "SQLAlchemyPersistenceError",
    "StoreUnavailableError",
    "UnitOfWorkError",
    "translate_error",
]
