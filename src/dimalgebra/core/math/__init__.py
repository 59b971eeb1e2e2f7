"""
Core math modules для dimalgebra

Decimal/rational примитивы, общие для всех слоёв алгебры.
"""

from dimalgebra.core.math.numeric import (
    # Config
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    RATIONAL_POW_GUARD_DIGITS,
    DEFAULT_NUMERIC_CONFIG,
    NumericConfig,
    # Types
    Exponent,
    Numeric,
    Ordering,
    # Coercion
    is_integral,
    is_numeric,
    to_decimal,
    to_fraction,
    # Decimal arithmetic
    compare_decimals,
    decimal_add,
    decimal_divide,
    decimal_multiply,
    decimal_pow,
    decimal_subtract,
    normalize_decimal,
    # Validation
    validate_positive,
)

__all__ = [
    # Config
    "DECIMAL_PRECISION",
    "DECIMAL_ROUNDING",
    "RATIONAL_POW_GUARD_DIGITS",
    "DEFAULT_NUMERIC_CONFIG",
    "NumericConfig",
    # Types
    "Exponent",
    "Numeric",
    "Ordering",
    # Coercion
    "is_integral",
    "is_numeric",
    "to_decimal",
    "to_fraction",
    # Decimal arithmetic
    "compare_decimals",
    "decimal_add",
    "decimal_divide",
    "decimal_multiply",
    "decimal_pow",
    "decimal_subtract",
    "normalize_decimal",
    # Validation
    "validate_positive",
]
