"""
Screen text — токенизация, валидация и детекция переполнения текста экрана.
"""

from src.core.screen.overflow import operand_overflows, overflows, overflows_value
from src.core.screen.tokenizer import (
    MINUS,
    NON_MINUS_OPERATORS,
    OPERATORS,
    TwoPart,
    operator_between,
    split_expression,
)
from src.core.screen.validator import (
    expression_parts,
    is_expression,
    is_number,
    normalize,
    parse_number,
)

__all__ = [
    # Tokenizer
    "MINUS",
    "NON_MINUS_OPERATORS",
    "OPERATORS",
    "TwoPart",
    "operator_between",
    "split_expression",
    # Validator
    "expression_parts",
    "is_expression",
    "is_number",
    "normalize",
    "parse_number",
    # OverflowGuard
    "operand_overflows",
    "overflows",
    "overflows_value",
]
