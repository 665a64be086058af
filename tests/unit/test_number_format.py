"""
Тесты для NumberFormatter

Проверяет:
1. Канонический вывод без хвостовых нулей
2. Урезание дробной части до лимита цифр
3. Разделители locale и группировку
4. Отрицательный ноль и не-finite значения
"""

import math

import pytest

from src.core.domain.number_symbols import NumberSymbols
from src.core.math.number_format import (
    INFINITY_TEXT,
    MAX_DIGITS,
    NAN_TEXT,
    count_digits,
    format_number,
)
from src.core.screen.validator import parse_number

COMMA_DECIMAL = NumberSymbols(decimal_separator=",", grouping_separator=".")


class TestCountDigits:
    """Тесты для count_digits"""

    def test_ignores_sign_and_separators(self) -> None:
        assert count_digits("-1,234.50") == 6
        assert count_digits("0") == 1
        assert count_digits("") == 0

    def test_ignores_operators(self) -> None:
        assert count_digits("12+-34") == 4


class TestFormatNumber:
    """Тесты для format_number"""

    def test_integers_without_fraction(self) -> None:
        """Целые значения без дробной части"""
        assert format_number(1024.0) == "1024"
        assert format_number(4.0) == "4"
        assert format_number(0.0) == "0"
        assert format_number(-3.0) == "-3"

    def test_trailing_zeros_trimmed(self) -> None:
        """Хвостовые нули удаляются"""
        assert format_number(2.5) == "2.5"
        assert format_number(-0.125) == "-0.125"

    def test_float_noise_removed(self) -> None:
        """0.1 + 0.2 отображается как 0.3"""
        assert format_number(0.1 + 0.2) == "0.3"

    def test_repeating_fraction_trimmed_to_digit_limit(self) -> None:
        """1/3 урезается до 15 цифр (включая ведущий 0)"""
        rendered = format_number(1.0 / 3.0)
        assert rendered == "0.33333333333333"
        assert count_digits(rendered) == MAX_DIGITS

    def test_repeating_fraction_rounded(self) -> None:
        """2/3 округляется в последнем знаке"""
        assert format_number(2.0 / 3.0) == "0.66666666666667"

    def test_large_value_returns_integer_rendering(self) -> None:
        """Если даже целое превышает лимит — возвращается целое"""
        assert format_number(1e16) == "10000000000000000"

    def test_fifteen_digit_integer_kept(self) -> None:
        assert format_number(123456789012345.0) == "123456789012345"

    def test_negative_zero(self) -> None:
        """-0.0 отображается как "-0" """
        assert format_number(-0.0) == "-0"

    def test_non_finite(self) -> None:
        """NaN и Inf"""
        assert format_number(math.nan) == NAN_TEXT
        assert format_number(math.inf) == INFINITY_TEXT
        assert format_number(-math.inf) == f"-{INFINITY_TEXT}"

    def test_custom_digit_limit(self) -> None:
        """Лимит цифр настраивается"""
        assert format_number(1.0 / 3.0, max_digits=5) == "0.3333"

    def test_custom_fraction_capacity(self) -> None:
        """Ёмкость дробной части настраивается"""
        assert format_number(3.14159, max_fraction_digits=2) == "3.14"
        assert format_number(2.5, max_fraction_digits=0) == "2"


class TestFormatNumberLocale:
    """Разделители locale"""

    def test_decimal_separator_replaced(self) -> None:
        assert format_number(2.5, COMMA_DECIMAL) == "2,5"

    def test_no_grouping_by_default(self) -> None:
        assert format_number(1234567.5) == "1234567.5"

    def test_grouping_with_default_symbols(self) -> None:
        assert format_number(1234567.5, use_grouping=True) == "1,234,567.5"

    def test_grouping_with_comma_decimal(self) -> None:
        assert format_number(1234567.5, COMMA_DECIMAL, use_grouping=True) == "1.234.567,5"

    def test_grouping_negative(self) -> None:
        assert format_number(-1234.0, use_grouping=True) == "-1,234"


class TestFormatRoundTrip:
    """format(parse(s)) численно равен s для чисел до 15 цифр"""

    @pytest.mark.parametrize(
        "text",
        ["0", "-7", "3.5", "-0.001", "123456789012345", "98765.4321", ".5"],
    )
    def test_round_trip(self, text: str) -> None:
        value = parse_number(text)
        assert parse_number(format_number(value)) == pytest.approx(value)
