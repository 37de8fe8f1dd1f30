"""
In-memory operator implementations.

Provides concrete MemoryOperator subclasses for each SpecificationOperator
and a factory function to create registries.

Usage::

    from user_directory.specifications.operators_memory import (
        build_default_registry,
    )

    registry = build_default_registry()
    result = registry.evaluate(SpecificationOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .set import InOperator
from .standard import EqualOperator, LessThanOperator
from .string import ContainsOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance each call, so tests can register extra
    operators without leaking them elsewhere.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(SpecificationOperator.EQ, "MALE", "MALE")
        True
    """
    return MemoryOperatorRegistry(
        EqualOperator(),
        LessThanOperator(),
        InOperator(),
        ContainsOperator(),
    )


DEFAULT_MEMORY_REGISTRY = build_default_registry()

__all__ = [
    "DEFAULT_MEMORY_REGISTRY",
    "build_default_registry",
    "MemoryOperatorRegistry",
]
