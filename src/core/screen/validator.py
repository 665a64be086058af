"""
Validator — классификация текста экрана

Текст экрана — ровно одно из: число, выражение из двух операндов, ни то ни
другое. Число и выражение взаимоисключающие по построению split_expression.

Грамматика числа (после нормализации разделителей locale к "."):
    -?digits(.digits*)?   или   -?digits*.digits+
Хотя бы одна цифра с одной из сторон точки; пустая строка не число.
"""

import re
from typing import Final, Optional

from src.core.domain.number_symbols import DEFAULT_SYMBOLS, NumberSymbols
from src.core.screen.tokenizer import TwoPart, split_expression

_NUMBER_INTEGER_PART: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+\.?[0-9]*")
_NUMBER_FRACTION_PART: Final[re.Pattern[str]] = re.compile(r"-?[0-9]*\.[0-9]+")


def normalize(text: str, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> str:
    """
    Нормализация разделителей: удаление разделителя групп, десятичный → ".".

    Examples:
        >>> normalize("1.234,5", NumberSymbols(",", "."))
        '1234.5'
    """
    return text.replace(symbols.grouping_separator, "").replace(
        symbols.decimal_separator, "."
    )


def is_number(text: str, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> bool:
    """
    Проверка, является ли текст валидным десятичным числом.

    Examples:
        >>> is_number("-12.5")
        True
        >>> is_number("5.")
        True
        >>> is_number("-.5")
        True
        >>> is_number(".")
        False
        >>> is_number("")
        False
    """
    if not text:
        return False

    normalized = normalize(text, symbols)
    return bool(
        _NUMBER_INTEGER_PART.fullmatch(normalized)
        or _NUMBER_FRACTION_PART.fullmatch(normalized)
    )


def expression_parts(
    text: str, symbols: NumberSymbols = DEFAULT_SYMBOLS
) -> Optional[TwoPart]:
    """
    Операнды выражения, если оба операнда — валидные числа, иначе None.
    """
    parts = split_expression(text)
    if parts is None:
        return None
    if is_number(parts.left, symbols) and is_number(parts.right, symbols):
        return parts
    return None


def is_expression(text: str, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> bool:
    """
    Проверка, является ли текст вычислимым выражением "A op B".

    Examples:
        >>> is_expression("3--2")
        True
        >>> is_expression("1-2-3")
        False
        >>> is_expression("5+")
        False
    """
    return expression_parts(text, symbols) is not None


def parse_number(text: str, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> float:
    """
    Парсинг текста числа в float с учётом разделителей locale.

    Raises:
        ValueError: если нормализованный текст не парсится float()
    """
    return float(normalize(text, symbols))
