"""Domain layer: aggregates and the specification protocol."""

from __future__ import annotations

from .aggregate import ID, AggregateRoot
from .specification import ISpecification
from .user import Gender, User, UserType

__all__ = [
    "ID",
    "AggregateRoot",
    "Gender",
    "ISpecification",
    "User",
    "UserType",
]
