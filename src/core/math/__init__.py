"""
Core math modules калькулятора

Численные примитивы с IEEE-семантикой и форматирование чисел для экрана.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    NEGATIVE_INFINITY,
    NOT_A_NUMBER,
    POSITIVE_INFINITY,
    ieee_divide,
    is_valid_float,
    safe_pow,
    safe_reciprocal,
    safe_sqrt,
)

# Number Format
from src.core.math.number_format import (
    INFINITY_TEXT,
    MAX_DIGITS,
    MAX_FRACTION_DIGITS,
    NAN_TEXT,
    count_digits,
    format_number,
)

__all__ = [
    # Numerical Safeguards: Constants
    "NEGATIVE_INFINITY",
    "NOT_A_NUMBER",
    "POSITIVE_INFINITY",
    # Numerical Safeguards: Functions
    "ieee_divide",
    "is_valid_float",
    "safe_pow",
    "safe_reciprocal",
    "safe_sqrt",
    # Number Format: Constants
    "INFINITY_TEXT",
    "MAX_DIGITS",
    "MAX_FRACTION_DIGITS",
    "NAN_TEXT",
    # Number Format: Functions
    "count_digits",
    "format_number",
]
