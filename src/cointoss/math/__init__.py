"""
Math primitives для cointoss

Безопасное деление, санитизация и epsilon-сравнения.
"""

from cointoss.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PROBABILITY_SUM,
    # Safe division
    denom_safe_unsigned,
    safe_divide,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PROBABILITY_SUM",
    # Safe division
    "denom_safe_unsigned",
    "safe_divide",
    # NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Epsilon comparisons
    "is_close",
]
