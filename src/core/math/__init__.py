"""
Core math modules

Целочисленные примитивы signed 64-bit с гарантией обнаружения переполнения
и таксономия ошибок точной арифметики.
"""

# Errors
from src.core.math.errors import (
    DivisionByZeroError,
    FixedWidthOverflowError,
    NumericError,
    ZeroDenominatorError,
)

# Checked Arithmetic
from src.core.math.checked_arithmetic import (
    # Domain constants
    INT64_BITS,
    INT64_MAX,
    INT64_MIN,
    # Range checks
    is_int64,
    require_int64,
    # Checked operations
    checked_abs,
    checked_add,
    checked_multiply,
    checked_negate,
    checked_power,
    checked_subtract,
    gcd,
)

__all__ = [
    # Errors
    "NumericError",
    "ZeroDenominatorError",
    "DivisionByZeroError",
    "FixedWidthOverflowError",
    # Checked Arithmetic — Domain constants
    "INT64_BITS",
    "INT64_MAX",
    "INT64_MIN",
    # Checked Arithmetic — Range checks
    "is_int64",
    "require_int64",
    # Checked Arithmetic — Operations
    "checked_abs",
    "checked_add",
    "checked_multiply",
    "checked_negate",
    "checked_power",
    "checked_subtract",
    "gcd",
]
