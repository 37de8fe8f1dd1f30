"""
Page requests and page results.

``PageRequest`` says *which* slice of a result set to return; ``Page`` is
the envelope handed back to callers. Results are always ordered by
identity, so the same request over an unchanged store returns the same
slice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .config import SearchSettings
from .primitives.exceptions import InvalidPageRequestError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

T = TypeVar("T")
R = TypeVar("R")

_DEFAULT_SETTINGS = SearchSettings()


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page index and page size.

    A size of ``0`` is rejected rather than treated as a count-only query;
    use the repository's ``count`` for that.

    Raises:
        InvalidPageRequestError: when ``page < 0``, ``size < 1`` or
            ``size > max_page_size``.
    """

    page: int = 0
    size: int = _DEFAULT_SETTINGS.default_page_size
    max_page_size: int = field(
        default=_DEFAULT_SETTINGS.max_page_size, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        errors: dict[str, list[str]] = {}
        if self.page < 0:
            errors.setdefault("page", []).append(
                f"Page index must not be negative, got {self.page}"
            )
        if self.size < 1:
            errors.setdefault("size", []).append(
                f"Page size must be at least 1, got {self.size}"
            )
        elif self.size > self.max_page_size:
            errors.setdefault("size", []).append(
                f"Page size must not exceed {self.max_page_size}, got {self.size}"
            )
        if errors:
            raise InvalidPageRequestError(errors)

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int | None = None,
        *,
        settings: SearchSettings | None = None,
    ) -> PageRequest:
        """Build a request, taking the default size and bound from *settings*."""
        settings = settings or _DEFAULT_SETTINGS
        return cls(
            page=page,
            size=settings.default_page_size if size is None else size,
            max_page_size=settings.max_page_size,
        )

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size

    def next(self) -> PageRequest:
        return PageRequest(self.page + 1, self.size, self.max_page_size)


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Immutable page envelope.

    Field order (``results``, ``page_size``, ``page_number``,
    ``total_count``) is part of the public contract; serialisers rely on it.

    Attributes:
        results: Items of the requested page, in identity order.
        page_size: Size echoed from the request.
        page_number: Zero-based index echoed from the request.
        total_count: Number of items matching the filter across all pages.
    """

    results: tuple[T, ...]
    page_size: int
    page_number: int
    total_count: int

    @classmethod
    def of(
        cls, results: list[T] | tuple[T, ...], request: PageRequest, total_count: int
    ) -> Page[T]:
        return cls(
            results=tuple(results),
            page_size=request.size,
            page_number=request.page,
            total_count=total_count,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def is_empty(self) -> bool:
        return not self.results

    def map(self, fn: Callable[[T], R]) -> Page[R]:
        """Return a page with each result projected through *fn*."""
        return Page(
            results=tuple(fn(item) for item in self.results),
            page_size=self.page_size,
            page_number=self.page_number,
            total_count=self.total_count,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise with snake_case keys; results via ``model_dump`` if available."""
        return {
            "results": [
                item.model_dump(mode="json") if hasattr(item, "model_dump") else item
                for item in self.results
            ],
            "page_size": self.page_size,
            "page_number": self.page_number,
            "total_count": self.total_count,
        }


class PageRequestParser:
    """Parse ``page``/``size`` query params into a :class:`PageRequest`.

    Lenient: unparsable values fall back to defaults, the index is
    floored at 0 and the size is clamped into ``[1, max_page_size]``.
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._settings = settings or _DEFAULT_SETTINGS

    def parse(
        self,
        query_params: Mapping[str, Any],
        *,
        page_key: str = "page",
        size_key: str = "size",
    ) -> PageRequest:
        page = 0
        raw_page = query_params.get(page_key)
        if raw_page is not None:
            try:
                page = max(0, int(raw_page))
            except (TypeError, ValueError):
                page = 0

        size = self._settings.default_page_size
        raw_size = query_params.get(size_key)
        if raw_size is not None:
            try:
                size = min(self._settings.max_page_size, max(1, int(raw_size)))
            except (TypeError, ValueError):
                size = self._settings.default_page_size

        return PageRequest.of(page, size, settings=self._settings)
