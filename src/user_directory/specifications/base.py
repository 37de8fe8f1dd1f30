from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from ..domain.specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T]):
    """Base class for specifications with conjunction support."""

    def is_satisfied_by(self, candidate: T) -> bool:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    @property
    def is_noop(self) -> bool:
        return False

    def __and__(self, other: ISpecification[T]) -> BaseSpecification[T]:
        return AndSpecification.of(self, other)

    def merge(self, other: ISpecification[T]) -> BaseSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification.of(self, other)


class NoOpSpecification(BaseSpecification[T]):
    """The "no constraint" variant.

    Identity element of conjunction: ``noop & spec`` and ``spec & noop``
    both return ``spec``. It never means "match nothing".
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {}

    @property
    def is_noop(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoOpSpecification)

    def __hash__(self) -> int:
        return hash(NoOpSpecification)

    def __repr__(self) -> str:
        return "NoOpSpecification()"


class AndSpecification(BaseSpecification[T]):
    """Logical AND composite specification."""

    def __init__(self, *specifications: ISpecification[T]) -> None:
        self.specifications = specifications

    @classmethod
    def of(cls, *specifications: ISpecification[T]) -> BaseSpecification[T]:
        """Conjoin *specifications*, dropping no-ops.

        Nested conjunctions are flattened. Returns a ``NoOpSpecification``
        when nothing active remains and the single survivor unchanged when
        only one does.
        """
        active: list[ISpecification[T]] = []
        for spec in specifications:
            if _is_noop(spec):
                continue
            if isinstance(spec, AndSpecification):
                active.extend(spec.specifications)
            else:
                active.append(spec)
        if not active:
            return NoOpSpecification()
        if len(active) == 1 and isinstance(active[0], BaseSpecification):
            return active[0]
        return cls(*active)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AndSpecification):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.specifications))

    def __repr__(self) -> str:
        inner = ", ".join(repr(spec) for spec in self.specifications)
        return f"AndSpecification({inner})"


def _is_noop(spec: ISpecification[Any]) -> bool:
    if isinstance(spec, BaseSpecification):
        return spec.is_noop
    return not spec.to_dict()
