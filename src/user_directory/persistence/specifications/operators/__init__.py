"""
Built-in SQLAlchemy operator implementations.

Call ``build_default_registry()`` to get a registry pre-loaded with every
operator the search fragments emit.
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .set import InOperator
from .standard import EqualOperator, LessThanOperator
from .string import ContainsOperator


def build_default_registry() -> SQLAlchemyOperatorRegistry:
    return SQLAlchemyOperatorRegistry(
        EqualOperator(),
        LessThanOperator(),
        InOperator(),
        ContainsOperator(),
    )


DEFAULT_SQLA_REGISTRY = build_default_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_registry",
    "ContainsOperator",
    "EqualOperator",
    "InOperator",
    "LessThanOperator",
]
