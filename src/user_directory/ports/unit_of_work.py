"""UnitOfWork: Abstract base class for the Unit of Work pattern."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger("user_directory.uow")


class UnitOfWork(ABC):
    """
    Abstract base class for Unit of Work implementations.

    Used as an async context manager: a clean exit commits, an exception
    rolls back and propagates. A failing rollback is logged and does not
    replace the exception that triggered it.

    Example:
        ```python
        async with uow:
            uow.session.add(model)
        ```
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit the transaction. Must be implemented by subclasses."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the transaction. Must be implemented by subclasses."""
        ...

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            logger.debug("Rolling back after %s", exc_type.__name__)
            try:
                await self.rollback()
            except Exception:
                # The triggering error keeps propagating; record this one.
                logger.exception(
                    "Rollback failed while handling %s", exc_type.__name__
                )
