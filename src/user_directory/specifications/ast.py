from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from .base import BaseSpecification
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry

T = TypeVar("T", contravariant=True)


class AttributeSpecification(BaseSpecification[T]):
    """
    Specification that checks a single attribute value.

    Delegates in-memory evaluation to a :class:`MemoryOperatorRegistry`
    (strategy pattern). The registry is injected explicitly.
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any,
        *,
        registry: MemoryOperatorRegistry,
    ) -> None:
        self.attr = attr
        self.op = SpecificationOperator(op) if isinstance(op, str) else op
        self.val = val
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use build_default_registry() from operators_memory to create one."
            )
        self._registry = registry

    def is_satisfied_by(self, candidate: T) -> bool:
        actual_val = self._resolve_field(candidate, self.attr)
        return self._registry.evaluate(self.op, actual_val, self.val)

    @staticmethod
    def _resolve_field(obj: Any, attr: str) -> Any:
        if obj is None:
            return None
        return obj.get(attr) if isinstance(obj, dict) else getattr(obj, attr, None)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        val = self.val
        if isinstance(val, (set, frozenset)):
            # Sets have no stable iteration order; sort for a reproducible AST.
            val = sorted(val, key=_sort_key)
        return {
            "op": self.op.value,
            "attr": self.attr,
            "val": val,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSpecification):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.attr, self.op, repr(self.to_dict()["val"])))

    def __repr__(self) -> str:
        return f"AttributeSpecification({self.attr!r}, {self.op.value!r}, {self.val!r})"


def _sort_key(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)
