"""Fold predicate fragments into a single conjunctive specification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import AndSpecification

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.specification import ISpecification
    from .base import BaseSpecification


def compose(
    fragments: Iterable[ISpecification[Any]],
    *,
    visibility: ISpecification[Any],
) -> BaseSpecification[Any]:
    """
    Return ``f1 AND f2 AND ... AND fn AND visibility``.

    No-op fragments contribute nothing; with no active fragments the result
    is the visibility fragment alone. The visibility fragment is appended
    last and is keyword-only so callers cannot forget it.
    """
    return AndSpecification.of(*fragments, visibility)
