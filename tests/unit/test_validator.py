"""
Тесты для Validator

Проверяет:
1. Грамматику числа (с точкой, без, с ведущей точкой, со знаком)
2. Нормализацию разделителей locale
3. Классификацию выражений
4. Взаимоисключаемость число / выражение
5. Парсинг чисел
"""

import pytest

from src.core.domain.number_symbols import NumberSymbols
from src.core.screen.tokenizer import split_expression
from src.core.screen.validator import (
    expression_parts,
    is_expression,
    is_number,
    normalize,
    parse_number,
)

COMMA_DECIMAL = NumberSymbols(decimal_separator=",", grouping_separator=".")

VALID_NUMBERS = ["0", "-0", "5", "-12", "5.", "12.34", "-.5", ".5", "0.0", "1,234.5"]
INVALID_NUMBERS = ["", ".", "-", "-.", "1.2.3", "abc", "5+3", "1e5", "--5", "5-"]
VALID_EXPRESSIONS = ["5+3", "3--2", "-3--2", "-3-2", "5+-3", "2^10", "5.+.5", "8/0"]


# =============================================================================
# ЧИСЛА
# =============================================================================


class TestIsNumber:
    """Тесты для is_number"""

    @pytest.mark.parametrize("text", VALID_NUMBERS)
    def test_valid(self, text: str) -> None:
        assert is_number(text)

    @pytest.mark.parametrize("text", INVALID_NUMBERS)
    def test_invalid(self, text: str) -> None:
        assert not is_number(text)

    def test_comma_decimal_locale(self) -> None:
        """Десятичная запятая"""
        assert is_number("12,5", COMMA_DECIMAL)
        assert is_number("1.234,5", COMMA_DECIMAL)
        assert not is_number("1,2,3", COMMA_DECIMAL)


class TestNormalize:
    """Тесты для normalize"""

    def test_default_symbols(self) -> None:
        assert normalize("1,234.5") == "1234.5"

    def test_comma_decimal(self) -> None:
        assert normalize("1.234,5", COMMA_DECIMAL) == "1234.5"


# =============================================================================
# ВЫРАЖЕНИЯ
# =============================================================================


class TestIsExpression:
    """Тесты для is_expression"""

    @pytest.mark.parametrize("text", VALID_EXPRESSIONS)
    def test_valid(self, text: str) -> None:
        assert is_expression(text)

    @pytest.mark.parametrize("text", ["5", "5+", "+5", "1-2-3", "5+3*2", "5++3", "", "-5"])
    def test_invalid(self, text: str) -> None:
        assert not is_expression(text)

    def test_expression_parts(self) -> None:
        assert expression_parts("-3--2") == ("-3", "-2")
        assert expression_parts("1-2-3") is None

    def test_comma_decimal_locale(self) -> None:
        assert is_expression("1,5+2,5", COMMA_DECIMAL)


class TestClassificationExclusive:
    """Число и выражение взаимоисключающие"""

    @pytest.mark.parametrize("text", VALID_NUMBERS)
    def test_number_is_not_expression(self, text: str) -> None:
        assert is_number(text)
        assert not is_expression(text)

    @pytest.mark.parametrize("text", VALID_EXPRESSIONS)
    def test_expression_is_not_number(self, text: str) -> None:
        assert is_expression(text)
        assert not is_number(text)
        left, right = split_expression(text)
        assert is_number(left) and is_number(right)


# =============================================================================
# ПАРСИНГ
# =============================================================================


class TestParseNumber:
    """Тесты для parse_number"""

    def test_parse(self) -> None:
        assert parse_number("12.5") == 12.5
        assert parse_number("-.5") == -0.5
        assert parse_number("5.") == 5.0

    def test_parse_with_grouping(self) -> None:
        assert parse_number("1,234.5") == 1234.5

    def test_parse_comma_decimal(self) -> None:
        assert parse_number("1.234,5", COMMA_DECIMAL) == 1234.5

    def test_parse_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_number("abc")
