"""
Тесты для OverflowGuard

Проверяет:
1. Лимит 15 цифр для числа и каждого операнда выражения
2. Знак, точка и разделители не считаются
3. Переполнение значения по отформатированному представлению
4. Не-finite значения всегда переполнены
"""

import math

import pytest

from src.core.domain.number_symbols import NumberSymbols
from src.core.screen.overflow import operand_overflows, overflows, overflows_value

COMMA_DECIMAL = NumberSymbols(decimal_separator=",", grouping_separator=".")


class TestOverflowsText:
    """Тесты для overflows (текст)"""

    def test_sixteen_digit_integer_overflows(self) -> None:
        assert overflows("1234567890123456")

    def test_fifteen_digit_integer_does_not_overflow(self) -> None:
        assert not overflows("123456789012345")

    def test_sign_and_point_not_counted(self) -> None:
        assert not overflows("-123456789012345")
        assert not overflows("12345678901234.5")
        assert overflows("1234567890123.456")

    def test_grouping_separators_not_counted(self) -> None:
        assert not overflows("123,456,789,012,345")
        assert not overflows("123.456.789.012.345", COMMA_DECIMAL)

    @pytest.mark.parametrize("text", ["1+1234567890123456", "1234567890123456-1", "-1--1234567890123456"])
    def test_any_operand_overflows(self, text: str) -> None:
        assert overflows(text)

    def test_expression_with_short_operands(self) -> None:
        assert not overflows("123456789012345*123456789012345")

    def test_non_numeric_never_overflows(self) -> None:
        """Невалидный текст отклоняется валидатором, не guard'ом"""
        assert not overflows("12345678901234567+")
        assert not overflows("abc")
        assert not overflows("")

    def test_custom_limit(self) -> None:
        assert overflows("123456", max_digits=5)
        assert not operand_overflows("12345", max_digits=5)


class TestOverflowsValue:
    """Тесты для overflows_value (после форматирования)"""

    def test_large_value_overflows(self) -> None:
        assert overflows_value(1e16)
        assert overflows_value(1e15)

    def test_fifteen_digit_value_fits(self) -> None:
        assert not overflows_value(123456789012345.0)
        assert not overflows_value(1e14)

    def test_repeating_fraction_fits_after_trim(self) -> None:
        """1/3 урезается форматированием и не переполняется"""
        assert not overflows_value(1.0 / 3.0)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_overflows(self, value: float) -> None:
        assert overflows_value(value)

    def test_grouping_does_not_affect_result(self) -> None:
        assert not overflows_value(123456789012345.0, use_grouping=True)
        assert overflows_value(1234567890123456.0, use_grouping=True)
