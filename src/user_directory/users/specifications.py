"""
User search predicates.

Thin, field-bound wrappers over the generic fragment library, plus the
composition used by every user search::

    spec = build_search_specification(criteria, clock)
    spec.to_dict()
    # {"op": "and", "conditions": [
    #     {"op": "contains", "attr": "name", "val": "J"},
    #     {"op": "=", "attr": "enabled", "val": True}]}
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..specifications import (
    compose,
    equals,
    member_of,
    minimum_age,
    substring_match,
    visibility_is,
)

if TYPE_CHECKING:
    from ..domain.user import Gender, UserType
    from ..primitives.clock import IClock
    from ..specifications import BaseSpecification
    from .criteria import SearchUsersCriteria


def name_like(name: str | None) -> BaseSpecification[Any]:
    return substring_match("name", name)


def older_than(years: int | None, clock: IClock) -> BaseSpecification[Any]:
    return minimum_age("birthdate", years, clock)


def type_in(types: Iterable[UserType] | None) -> BaseSpecification[Any]:
    return member_of("type", types)


def gender_equals(gender: Gender | None) -> BaseSpecification[Any]:
    return equals("gender", gender)


def is_enabled() -> BaseSpecification[Any]:
    return visibility_is(True)


def build_search_specification(
    criteria: SearchUsersCriteria, clock: IClock
) -> BaseSpecification[Any]:
    """Conjunction of every given criterion, always restricted to enabled users."""
    return compose(
        [
            name_like(criteria.name),
            older_than(criteria.older_than, clock),
            type_in(criteria.types),
            gender_equals(criteria.gender),
        ],
        visibility=is_enabled(),
    )
