"""Operator lookup shared by the in-memory and SQL backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from .operators import SpecificationOperator


class NamedOperator(Protocol):
    @property
    def name(self) -> SpecificationOperator: ...


S = TypeVar("S", bound=NamedOperator)


class OperatorRegistry(Generic[S]):
    """
    Maps each :class:`SpecificationOperator` to one backend strategy.

    Registering a strategy for an operator that already has one replaces
    it, so a caller can swap in e.g. a case-insensitive ``contains``.
    """

    backend = "this backend"

    def __init__(self, *strategies: S) -> None:
        self._strategies: dict[SpecificationOperator, S] = {}
        self.register(*strategies)

    def register(self, *strategies: S) -> None:
        for strategy in strategies:
            self._strategies[strategy.name] = strategy

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._strategies)

    def lookup(self, name: SpecificationOperator) -> S:
        """
        Raises:
            ValueError: If no strategy is registered for ``name``.
        """
        try:
            return self._strategies[name]
        except KeyError:
            raise ValueError(
                f"Unsupported operator for {self.backend}: {name}"
            ) from None
