from enum import Enum


class SpecificationOperator(str, Enum):
    """Supported operators for specifications."""

    # Standard comparison
    EQ = "="
    LT = "<"

    # Set membership
    IN = "in"

    # String operations
    CONTAINS = "contains"

    # Logical operators
    AND = "and"
