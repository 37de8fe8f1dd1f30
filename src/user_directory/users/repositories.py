"""User-bound repository types."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from ..adapters.memory import InMemoryRepository
from ..domain.user import User
from ..persistence.models import UserModel
from ..persistence.repository import SQLAlchemyRepository
from ..ports.repository import IRepository

if TYPE_CHECKING:
    from ..persistence.repository import UnitOfWorkFactory
    from ..persistence.specifications.strategy import SQLAlchemyOperatorRegistry

IUserRepository = IRepository[User, UUID]


class InMemoryUserRepository(InMemoryRepository[User, UUID]):
    pass


class SQLAlchemyUserRepository(SQLAlchemyRepository[User, UUID]):
    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        super().__init__(User, UserModel, uow_factory, registry=registry)
