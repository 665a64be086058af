"""
NumberFormatter — каноническое отображение float на экране калькулятора

Форматирование выполняется с настраиваемыми разделителями (locale):
- До MAX_FRACTION_DIGITS дробных знаков, без лишних хвостовых нулей
- Ёмкость дробной части урезается от 15 до 0 знаков, пока результат
  превышает лимит MAX_DIGITS цифр
- Если даже целое отображение превышает лимит, оно возвращается как есть:
  переполнение ловит вызывающий код

Float значения дают длинные хвосты (0.1 + 0.2 = 0.30000000000000004).
Цикл урезания приближает минимальное точное представление без
полноценной десятичной арифметики.
"""

from typing import Final

from src.core.domain.number_symbols import DEFAULT_SYMBOLS, NumberSymbols
from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Лимит значащих цифр на экране (знак и разделители не учитываются)
MAX_DIGITS: Final[int] = 15

# Максимальная ёмкость дробной части при форматировании
MAX_FRACTION_DIGITS: Final[int] = 15

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

NAN_TEXT: Final[str] = "NaN"
INFINITY_TEXT: Final[str] = "Infinity"


# =============================================================================
# ПОДСЧЁТ ЦИФР
# =============================================================================


def count_digits(text: str) -> int:
    """
    Количество ASCII цифр в тексте.

    Знак, десятичная точка и разделители групп игнорируются.

    Examples:
        >>> count_digits("-1,234.50")
        6
    """
    return sum(1 for ch in text if ch in _ASCII_DIGITS)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _render_fixed(
    value: float,
    fraction_digits: int,
    symbols: NumberSymbols,
    use_grouping: bool,
) -> str:
    # f-string форматирование float корректно округляет точное двоичное значение
    spec = f",.{fraction_digits}f" if use_grouping else f".{fraction_digits}f"
    text = format(value, spec)

    if "." in text:
        text = text.rstrip("0").rstrip(".")

    # Одновременная замена: разделители различны по построению NumberSymbols
    return text.translate(
        str.maketrans(
            {",": symbols.grouping_separator, ".": symbols.decimal_separator}
        )
    )


def _render_non_finite(value: float) -> str:
    if value != value:
        return NAN_TEXT
    return INFINITY_TEXT if value > 0 else f"-{INFINITY_TEXT}"


def format_number(
    value: float,
    symbols: NumberSymbols = DEFAULT_SYMBOLS,
    max_fraction_digits: int = MAX_FRACTION_DIGITS,
    max_digits: int = MAX_DIGITS,
    use_grouping: bool = False,
) -> str:
    """
    Форматирование float для экрана калькулятора.

    Алгоритм:
        for n in max_fraction_digits..0:
            text = render(value, n знаков после точки, без хвостовых нулей)
            if count_digits(text) <= max_digits: return text
        return render(value, 0)

    Args:
        value: Значение для отображения
        symbols: Десятичный разделитель и разделитель групп
        max_fraction_digits: Стартовая ёмкость дробной части
        max_digits: Лимит цифр, при превышении ёмкость урезается
        use_grouping: Вставлять разделители групп по 3 цифры в целую часть

    Returns:
        Отформатированная строка. NaN → "NaN", ±Inf → "Infinity"/"-Infinity".
        Отрицательный ноль отображается как "-0".

    Examples:
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(1024.0)
        '1024'
        >>> format_number(1.0 / 3.0)
        '0.33333333333333'
        >>> format_number(1234.5, NumberSymbols(",", "."), use_grouping=True)
        '1.234,5'
    """
    if not is_valid_float(value):
        return _render_non_finite(value)

    text = ""
    for fraction_digits in range(max_fraction_digits, -1, -1):
        text = _render_fixed(value, fraction_digits, symbols, use_grouping)
        if count_digits(text) <= max_digits:
            return text

    return text
