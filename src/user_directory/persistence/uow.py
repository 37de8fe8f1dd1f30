"""One database transaction per ``async with`` block."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ports.unit_of_work import UnitOfWork
from .exceptions import SessionManagementError, UnitOfWorkError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession

    AsyncSessionFactory = Callable[[], AsyncSession]

logger = logging.getLogger("user_directory.uow")


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Wraps an ``AsyncSession`` transaction.

    With ``session_factory`` each unit opens a fresh session and closes it
    on exit; this is what the repositories use by default. With
    ``session`` the unit joins a session the caller owns and leaves it
    open.

    Example::

        factory = async_sessionmaker(engine, expire_on_commit=False)
        async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
            await users.add(user, uow=uow)
    """

    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: AsyncSessionFactory | None = None,
    ) -> None:
        if (session is None) == (session_factory is None):
            raise SessionManagementError(
                "Pass exactly one of 'session' or 'session_factory'."
            )
        self._session = session
        self._session_factory = session_factory

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise UnitOfWorkError("No active session; enter the unit of work first.")
        return self._session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if self._session_factory is not None:
            self._session = self._session_factory()
        if not self.session.in_transaction():
            try:
                await self.session.begin()
            except Exception as e:  # noqa: BLE001
                raise SessionManagementError(
                    f"Failed to begin transaction: {e}"
                ) from e
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc_val, exc_tb)
        finally:
            if self._session_factory is not None and self._session is not None:
                session, self._session = self._session, None
                await session.close()

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except Exception as e:  # noqa: BLE001
            logger.warning("Commit failed, rolling back: %s", e)
            try:
                await self.rollback()
            except UnitOfWorkError:
                logger.exception("Rollback after failed commit also failed")
            raise UnitOfWorkError(f"Failed to commit transaction: {e}") from e

    async def rollback(self) -> None:
        if not self.session.in_transaction():
            return
        try:
            await self.session.rollback()
        except Exception as e:  # noqa: BLE001
            raise UnitOfWorkError(f"Failed to rollback transaction: {e}") from e
