"""
OverflowGuard — детекция переполнения экрана

Переполнение — больше MAX_DIGITS цифр в числе или в любом операнде
выражения. Знак, десятичная точка и разделители групп не считаются.

Переполнение значения float определяется по ОТФОРМАТИРОВАННОМУ
представлению, а не по величине: проверяется ровно то, что увидит
пользователь. NaN и ±Infinity всегда считаются переполнением.

Текст, не являющийся ни числом, ни выражением, не переполняется: его
отклоняет валидатор.
"""

from src.core.domain.number_symbols import DEFAULT_SYMBOLS, NumberSymbols
from src.core.math.number_format import (
    MAX_DIGITS,
    MAX_FRACTION_DIGITS,
    count_digits,
    format_number,
)
from src.core.math.numerical_safeguards import is_valid_float
from src.core.screen.validator import expression_parts, is_number


def operand_overflows(token: str, max_digits: int = MAX_DIGITS) -> bool:
    """True если в операнде больше max_digits цифр."""
    return count_digits(token) > max_digits


def overflows(
    text: str,
    symbols: NumberSymbols = DEFAULT_SYMBOLS,
    max_digits: int = MAX_DIGITS,
) -> bool:
    """
    Проверка переполнения текста экрана.

    Args:
        text: Число или выражение
        symbols: Разделители locale
        max_digits: Лимит цифр на операнд

    Returns:
        True если текст — число или выражение и хотя бы один операнд
        превышает лимит, иначе False

    Examples:
        >>> overflows("1234567890123456")
        True
        >>> overflows("123456789012345")
        False
        >>> overflows("1+1234567890123456")
        True
    """
    parts = expression_parts(text, symbols)
    if parts is not None:
        return operand_overflows(parts.left, max_digits) or operand_overflows(
            parts.right, max_digits
        )

    if is_number(text, symbols):
        return operand_overflows(text, max_digits)

    return False


def overflows_value(
    value: float,
    symbols: NumberSymbols = DEFAULT_SYMBOLS,
    max_digits: int = MAX_DIGITS,
    max_fraction_digits: int = MAX_FRACTION_DIGITS,
    use_grouping: bool = False,
) -> bool:
    """
    Проверка переполнения значения после форматирования.

    Examples:
        >>> overflows_value(1e16)
        True
        >>> overflows_value(1.0 / 3.0)
        False
        >>> overflows_value(float("inf"))
        True
    """
    if not is_valid_float(value):
        return True

    rendered = format_number(
        value,
        symbols,
        max_fraction_digits=max_fraction_digits,
        max_digits=max_digits,
        use_grouping=use_grouping,
    )
    return overflows(rendered, symbols, max_digits)
