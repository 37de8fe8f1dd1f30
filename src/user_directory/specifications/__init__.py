from .ast import AttributeSpecification
from .base import AndSpecification, BaseSpecification, NoOpSpecification
from .composer import compose
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .fragments import (
    equals,
    member_of,
    minimum_age,
    substring_match,
    visibility_is,
    years_before,
)
from .operators import SpecificationOperator
from .operators_memory import DEFAULT_MEMORY_REGISTRY, build_default_registry
from .registry import OperatorRegistry

__all__ = [
    # Core types
    "SpecificationOperator",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "NoOpSpecification",
    # Fragments / composition
    "substring_match",
    "minimum_age",
    "member_of",
    "equals",
    "visibility_is",
    "years_before",
    "compose",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "OperatorRegistry",
    "DEFAULT_MEMORY_REGISTRY",
    "build_default_registry",
]
