"""Evaluate specification leaves against Python objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .registry import OperatorRegistry

if TYPE_CHECKING:
    from .operators import SpecificationOperator


class MemoryOperator(ABC):
    """One operator's comparison on already-resolved attribute values."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """``field_value`` comes from the candidate (``None`` if it lacks the
        attribute); ``condition_value`` is the leaf's ``val``."""
        ...


class MemoryOperatorRegistry(OperatorRegistry[MemoryOperator]):
    backend = "in-memory evaluation"

    def evaluate(
        self,
        name: SpecificationOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        return self.lookup(name).evaluate(field_value, condition_value)
