"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate filtering rules for querying aggregates.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether the candidate satisfies the specification.
        Used for in-memory filtering.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Storage adapters compile this tree into their native filter language.
        An empty dict means "no constraint".
        """
        ...
