from .compiler import apply_page, build_sqla_filter
from .operators import DEFAULT_SQLA_REGISTRY, build_default_registry
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "build_sqla_filter",
    "apply_page",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_registry",
]
