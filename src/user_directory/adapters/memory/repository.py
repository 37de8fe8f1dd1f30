"""InMemoryRepository: dict-backed store for unit tests and local use."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...domain.aggregate import ID, AggregateRoot
from ...pagination import Page

if TYPE_CHECKING:
    from ...domain.specification import ISpecification
    from ...pagination import PageRequest

T = TypeVar("T", bound=AggregateRoot[Any])


class InMemoryRepository(Generic[T, ID]):
    """In-memory implementation of ``IRepository[T, ID]``.

    Stores aggregates in a plain dict keyed by their ``id``. Stored objects
    are deep copies, so callers mutating an aggregate after ``add`` do not
    change what the store sees.
    """

    def __init__(self) -> None:
        self._store: dict[ID, T] = {}

    async def add(self, entity: T) -> ID:
        self._store[entity.id] = entity.model_copy(deep=True)
        return entity.id  # type: ignore[no-any-return]

    async def get(self, entity_id: ID) -> T | None:
        entity = self._store.get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    async def find_page(
        self, specification: ISpecification[T], page_request: PageRequest
    ) -> Page[T]:
        """Filter, order by id, then slice; count and page share one snapshot."""
        matches = self._matching(specification)
        start = page_request.offset
        window = matches[start : start + page_request.limit]
        return Page.of(
            [entity.model_copy(deep=True) for entity in window],
            page_request,
            total_count=len(matches),
        )

    async def count(self, specification: ISpecification[T]) -> int:
        return len(self._matching(specification))

    def _matching(self, specification: ISpecification[T]) -> list[T]:
        snapshot = list(self._store.values())
        matches = [e for e in snapshot if specification.is_satisfied_by(e)]
        matches.sort(key=lambda e: e.id)
        return matches
