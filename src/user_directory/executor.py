"""Paged query execution over any ``IRepository``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from .domain.specification import ISpecification
    from .pagination import Page, PageRequest
    from .ports.repository import IRepository

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger("user_directory.search")


class PagedQueryExecutor(Generic[T, R]):
    """
    Run a composed specification against a repository and project the page.

    The repository evaluates the predicate, orders by identity and returns
    the requested slice together with the filtered total; the executor
    only adds the projection and logging. Repository errors propagate
    unchanged.
    """

    def __init__(
        self,
        repository: IRepository[Any, Any],
        projection: Callable[[T], R],
    ) -> None:
        self._repository = repository
        self._projection = projection

    async def execute(
        self, specification: ISpecification[T], page_request: PageRequest
    ) -> Page[R]:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Executing page=%d size=%d filter=%s",
                page_request.page,
                page_request.size,
                specification.to_dict(),
            )
        page = await self._repository.find_page(specification, page_request)
        logger.info(
            "Search returned %d of %d (page=%d size=%d)",
            len(page.results),
            page.total_count,
            page.page_number,
            page.page_size,
        )
        return page.map(self._projection)
