"""Per-operator SQL clause builders, keyed like the in-memory evaluator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ...specifications.registry import OperatorRegistry

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ...specifications.operators import SpecificationOperator


class SQLAlchemyOperator(ABC):
    """Turns one specification leaf into a ``ColumnElement[bool]``."""

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """``column`` is the mapped attribute named by the leaf's ``attr``."""
        ...


class SQLAlchemyOperatorRegistry(OperatorRegistry[SQLAlchemyOperator]):
    backend = "SQLAlchemy"

    def apply(
        self, name: SpecificationOperator, column: Any, value: Any
    ) -> ColumnElement[bool]:
        return self.lookup(name).apply(column, value)
