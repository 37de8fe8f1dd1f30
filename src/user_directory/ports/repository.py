"""IRepository: generic repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable
from uuid import UUID

from ..domain.aggregate import AggregateRoot

if TYPE_CHECKING:
    from ..domain.specification import ISpecification
    from ..pagination import Page, PageRequest

T = TypeVar("T", bound=AggregateRoot[Any])
ID = TypeVar("ID", str, int, UUID, contravariant=True)


@runtime_checkable
class IRepository(Protocol[T, ID]):
    """
    Generic repository interface for state-stored aggregates.

    ``find_page`` is the paged query contract: it evaluates the
    specification against the whole collection, orders matches by
    identity, and returns one page together with the total number of
    matches. Count and page must come from the same consistent read::

        page = await repo.find_page(spec, PageRequest(page=0, size=20))
        page.results      # at most 20 aggregates
        page.total_count  # every match, not just this page

    Store failures surface as ``StoreUnavailableError`` or
    ``QueryExecutionError``; implementations never retry.
    """

    async def add(self, entity: T) -> ID: ...

    async def get(self, entity_id: ID) -> T | None: ...

    async def find_page(
        self, specification: ISpecification[T], page_request: PageRequest
    ) -> Page[T]: ...

    async def count(self, specification: ISpecification[T]) -> int: ...
