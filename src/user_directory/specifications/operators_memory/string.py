"""String operators: contains."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator


class ContainsOperator(MemoryOperator):
    """Case-sensitive, unanchored substring test.

    The condition value is taken literally: ``%`` and ``_`` carry no
    wildcard meaning.
    """

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value) in str(field_value)
