"""
Compile a specification dictionary (AST) into a SQLAlchemy filter expression.

``build_sqla_filter`` walks the AST produced by ``spec.to_dict()`` and
delegates each leaf to a ``SQLAlchemyOperatorRegistry``. The empty AST of a
no-op specification compiles to ``TRUE``.

``apply_page`` adds the identity ordering and the offset/limit window of a
``PageRequest`` to a ``Select``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, true

from ...specifications.operators import SpecificationOperator
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from ...pagination import PageRequest
    from .strategy import SQLAlchemyOperatorRegistry


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a specification dictionary.

    Args:
        model: The SQLAlchemy model class.
        data: Specification dictionary (JSON AST produced by ``spec.to_dict()``).
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Raises:
        AttributeError: If a leaf names a column the model does not have.
        ValueError: If a leaf uses an operator the registry does not know.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    return _compile_node(model, data, reg)


def apply_page(
    stmt: Select[Any], model: type[Any], page_request: PageRequest
) -> Select[Any]:
    """Order by identity and cut the page window out of *stmt*."""
    return (
        stmt.order_by(model.id.asc())
        .offset(page_request.offset)
        .limit(page_request.limit)
    )


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    if not data:
        return true()

    op_str = data.get("op", "").lower()
    if op_str == SpecificationOperator.AND:
        conditions = [
            _compile_node(model, c, registry) for c in data.get("conditions", [])
        ]
        return and_(true(), *conditions)

    return _compile_leaf_node(model, data, registry, op_str)


def _compile_leaf_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
    op_str: str,
) -> ColumnElement[bool]:
    attr: str | None = data.get("attr")
    if not attr:
        raise ValueError(f"Specification missing 'attr': {data}")

    column = getattr(model, attr, None)
    if column is None:
        raise AttributeError(f"Model {model} has no attribute {attr}")

    return registry.apply(SpecificationOperator(op_str), column, data.get("val"))
