"""
Predicate fragment library.

Each function maps one optional criterion onto a specification. An absent
criterion (``None``, and for ``member_of`` also an empty collection)
yields :class:`NoOpSpecification`, which vanishes under conjunction.
Fragments are independent of each other and of any storage backend.

Example::

    spec = compose(
        [
            substring_match("name", "J"),
            minimum_age("birthdate", 34, clock),
            member_of("type", None),
        ],
        visibility=visibility_is(True),
    )
    # → AND(name contains "J", birthdate < today - 34y, enabled = True)
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import TYPE_CHECKING, Any

from .ast import AttributeSpecification
from .base import BaseSpecification, NoOpSpecification
from .operators import SpecificationOperator
from .operators_memory import DEFAULT_MEMORY_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..primitives.clock import IClock
    from .evaluator import MemoryOperatorRegistry


def substring_match(
    field: str,
    needle: str | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """``field`` contains ``needle`` (case-sensitive, literal, unanchored)."""
    if needle is None:
        return NoOpSpecification()
    return AttributeSpecification(
        field,
        SpecificationOperator.CONTAINS,
        needle,
        registry=registry or DEFAULT_MEMORY_REGISTRY,
    )


def minimum_age(
    field: str,
    years: int | None,
    clock: IClock,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """``field`` (a date) is strictly earlier than ``clock.today() - years``.

    The clock is read once, when the fragment is built.
    """
    if years is None:
        return NoOpSpecification()
    cutoff = years_before(clock.today(), years)
    return AttributeSpecification(
        field,
        SpecificationOperator.LT,
        cutoff,
        registry=registry or DEFAULT_MEMORY_REGISTRY,
    )


def member_of(
    field: str,
    values: Iterable[Any] | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """``field`` is one of ``values``. Absent and empty both mean no constraint."""
    if values is None:
        return NoOpSpecification()
    frozen = frozenset(values)
    if not frozen:
        return NoOpSpecification()
    return AttributeSpecification(
        field,
        SpecificationOperator.IN,
        frozen,
        registry=registry or DEFAULT_MEMORY_REGISTRY,
    )


def equals(
    field: str,
    value: Any | None,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """``field`` equals ``value`` exactly."""
    if value is None:
        return NoOpSpecification()
    return AttributeSpecification(
        field,
        SpecificationOperator.EQ,
        value,
        registry=registry or DEFAULT_MEMORY_REGISTRY,
    )


def visibility_is(
    expected: bool,
    *,
    field: str = "enabled",
    registry: MemoryOperatorRegistry | None = None,
) -> BaseSpecification[Any]:
    """The soft-delete flag equals ``expected``. Never a no-op."""
    return AttributeSpecification(
        field,
        SpecificationOperator.EQ,
        expected,
        registry=registry or DEFAULT_MEMORY_REGISTRY,
    )


def years_before(reference: date, years: int) -> date:
    """Calendar subtraction of whole years; Feb 29 falls back to Feb 28.

    Results before year 1 clamp to ``date.min``, so a
    ``birthdate < cutoff`` test against it matches nobody.
    """
    year = reference.year - years
    if year < date.min.year:
        return date.min
    if year > date.max.year:
        return date.max
    if (reference.month, reference.day) == (2, 29) and not calendar.isleap(year):
        return reference.replace(year=year, day=28)
    return reference.replace(year=year)
