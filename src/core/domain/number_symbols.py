"""
NumberSymbols — разделители чисел текущей locale

Хост поставляет десятичный разделитель и разделитель групп. Ядро считает их
непрозрачными одиночными символами и запрашивает заново при каждом
форматировании, валидации и парсинге (без кэширования между сменами locale).
"""

import locale
from dataclasses import dataclass
from typing import Callable, Final

# Символы, зарезервированные грамматикой экрана
RESERVED_SYMBOLS: Final[frozenset[str]] = frozenset("0123456789+-*/^")


@dataclass(frozen=True)
class NumberSymbols:
    """Десятичный разделитель и разделитель групп.

    Invariants:
    - каждый разделитель ровно один символ
    - разделители различны
    - ни один не совпадает с цифрой, знаком минус или оператором
    """

    decimal_separator: str = "."
    grouping_separator: str = ","

    def __post_init__(self):
        for name in ("decimal_separator", "grouping_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
            if value in RESERVED_SYMBOLS:
                raise ValueError(f"{name} must not be a digit or operator, got {value!r}")

        if self.decimal_separator == self.grouping_separator:
            raise ValueError(
                f"decimal_separator and grouping_separator must differ, "
                f"got {self.decimal_separator!r} for both"
            )


DEFAULT_SYMBOLS: Final[NumberSymbols] = NumberSymbols()

SymbolsProvider = Callable[[], NumberSymbols]


def system_number_symbols() -> NumberSymbols:
    """Разделители из текущей C locale процесса (locale.localeconv).

    C/POSIX locale часто отдаёт пустой thousands_sep, поэтому для
    непригодных значений используется fallback "." / ",".
    """
    conventions = locale.localeconv()

    decimal = conventions.get("decimal_point") or "."
    if len(decimal) != 1 or decimal in RESERVED_SYMBOLS:
        decimal = "."

    grouping = conventions.get("thousands_sep") or ""
    if len(grouping) != 1 or grouping in RESERVED_SYMBOLS or grouping == decimal:
        grouping = "," if decimal != "," else "."

    return NumberSymbols(decimal_separator=decimal, grouping_separator=grouping)
