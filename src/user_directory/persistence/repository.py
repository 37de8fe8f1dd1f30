from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..domain.aggregate import ID, AggregateRoot
from ..pagination import Page
from .exceptions import translate_error
from .specifications.compiler import apply_page, build_sqla_filter

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession

    from ..domain.specification import ISpecification
    from ..pagination import PageRequest
    from .specifications.strategy import SQLAlchemyOperatorRegistry
    from .uow import SQLAlchemyUnitOfWork

    UnitOfWorkFactory = Callable[[], SQLAlchemyUnitOfWork]

T = TypeVar("T", bound=AggregateRoot[Any])

logger = logging.getLogger(__name__)


class SQLAlchemyRepository(Generic[T, ID]):
    """
    Implementation of ``IRepository`` using SQLAlchemy.

    Separates the domain entity type (``entity_cls``, a Pydantic
    ``AggregateRoot``) from the persistence model (``db_model_cls``, a
    SQLAlchemy ``DeclarativeBase`` subclass). Columns and fields share
    names, so mapping is a plain ``model_dump`` / ``model_validate``.

    Every call opens its own unit of work from ``uow_factory``. Pass
    ``uow=`` to run inside a caller-managed one instead::

        async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
            await repo.add(user, uow=uow)
            page = await repo.find_page(spec, PageRequest(size=20), uow=uow)

    ``find_page`` runs its count and its page query inside the same
    transaction. Driver errors surface as ``StoreUnavailableError``
    (connectivity) or ``QueryExecutionError`` (anything else); nothing is
    retried.
    """

    def __init__(
        self,
        entity_cls: type[T],
        db_model_cls: type[Any],
        uow_factory: UnitOfWorkFactory,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.db_model_cls = db_model_cls
        self._uow_factory = uow_factory
        self._registry = registry

    # -- mapping (overridable) ----------------------------------------------

    def to_model(self, entity: T) -> Any:
        """Convert domain entity → SQLAlchemy model."""
        return self.db_model_cls(**entity.model_dump())

    def from_model(self, model: Any) -> T:
        """Convert SQLAlchemy model → domain entity."""
        return self.entity_cls.model_validate(model, from_attributes=True)

    # -- CRUD ---------------------------------------------------------------

    async def add(self, entity: T, uow: SQLAlchemyUnitOfWork | None = None) -> ID:
        """Insert or update *entity* by identity."""
        async with self._session("add", uow) as session:
            await session.merge(self.to_model(entity))
            await session.flush()
        return entity.id  # type: ignore[no-any-return]

    async def get(
        self, entity_id: ID, uow: SQLAlchemyUnitOfWork | None = None
    ) -> T | None:
        async with self._session("get", uow) as session:
            model = await session.get(self.db_model_cls, entity_id)
            return self.from_model(model) if model is not None else None

    # -- paged query --------------------------------------------------------

    async def find_page(
        self,
        specification: ISpecification[T],
        page_request: PageRequest,
        uow: SQLAlchemyUnitOfWork | None = None,
    ) -> Page[T]:
        where = self._compile(specification)
        async with self._session("find_page", uow) as session:
            total = await self._count(session, where)
            stmt = apply_page(
                select(self.db_model_cls).where(where),
                self.db_model_cls,
                page_request,
            )
            result = await session.execute(stmt)
            models = result.scalars().all()
            results = [self.from_model(m) for m in models]

        logger.debug(
            "find_page %s page=%d size=%d -> %d of %d",
            self.db_model_cls.__tablename__,
            page_request.page,
            page_request.size,
            len(results),
            total,
        )
        return Page.of(results, page_request, total_count=total)

    async def count(
        self,
        specification: ISpecification[T],
        uow: SQLAlchemyUnitOfWork | None = None,
    ) -> int:
        where = self._compile(specification)
        async with self._session("count", uow) as session:
            return await self._count(session, where)

    # -- internals ------------------------------------------------------------

    def _compile(self, specification: ISpecification[T]) -> ColumnElement[bool]:
        return build_sqla_filter(
            self.db_model_cls, specification.to_dict(), registry=self._registry
        )

    async def _count(self, session: AsyncSession, where: ColumnElement[bool]) -> int:
        stmt = select(func.count()).select_from(self.db_model_cls).where(where)
        return int((await session.execute(stmt)).scalar_one())

    @asynccontextmanager
    async def _session(
        self, action: str, uow: SQLAlchemyUnitOfWork | None
    ) -> AsyncIterator[AsyncSession]:
        try:
            if uow is not None:
                yield uow.session
                return
            async with self._uow_factory() as owned:
                yield owned.session
        except SQLAlchemyError as e:
            logger.warning(
                "%s on %s failed: %s",
                action,
                self.db_model_cls.__tablename__,
                type(e).__name__,
            )
            raise translate_error(e, action) from e
