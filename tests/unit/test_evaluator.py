"""Тесты для Evaluator.

Coverage:
- Пять бинарных операторов
- Различение унарного/бинарного минуса при вычислении
- Деление на ноль, переполнение, NaN/Inf результаты
- Уже-число, ErrorState, незавершённое выражение (с подавлением и без)
- Разделители locale и группировка результата
"""

import dataclasses

import pytest

from src.core.domain.errors import ErrorKind, ErrorMessages
from src.core.domain.number_symbols import NumberSymbols
from src.engine.config import EngineConfig
from src.engine.evaluator import Evaluator, SolveOutcome, SolveResult

MESSAGES = ErrorMessages()


@pytest.fixture
def evaluator():
    return Evaluator()


class TestSolveExpressions:
    """Вычисление выражений."""

    @pytest.mark.parametrize(
        "screen, expected",
        [
            ("8/2", "4"),
            ("2^10", "1024"),
            ("2*3", "6"),
            ("7-10", "-3"),
            ("5+3", "8"),
            ("3--2", "5"),
            ("-3-2", "-5"),
            ("-3--2", "-1"),
            ("5+-3", "2"),
            ("0.1+0.2", "0.3"),
            ("1/3", "0.33333333333333"),
            ("2^-1", "0.5"),
            ("5.+.5", "5.5"),
        ],
    )
    def test_solved(self, evaluator, screen, expected):
        result = evaluator.solve(screen)

        assert result.outcome == SolveOutcome.SOLVED
        assert result.screen == expected
        assert result.error is None
        assert result.simplified

    def test_result_is_frozen(self, evaluator):
        result = evaluator.solve("1+1")
        assert isinstance(result, SolveResult)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.screen = "3"


class TestSolveFailures:
    """Ошибки вычисления."""

    def test_division_by_zero(self, evaluator):
        result = evaluator.solve("8/0")

        assert result.outcome == SolveOutcome.FAILED
        assert result.error == ErrorKind.DIVISION_BY_ZERO
        assert result.screen == MESSAGES.division_by_zero_screen
        assert not result.simplified

    @pytest.mark.parametrize("screen", ["8/0.0", "0/0", "5/-0"])
    def test_division_by_any_zero_text(self, evaluator, screen):
        assert evaluator.solve(screen).error == ErrorKind.DIVISION_BY_ZERO

    def test_zero_to_negative_power_overflows(self, evaluator):
        """0^-1 → Infinity → OVERFLOW"""
        result = evaluator.solve("0^-1")

        assert result.outcome == SolveOutcome.FAILED
        assert result.error == ErrorKind.OVERFLOW
        assert result.screen == MESSAGES.overflow_screen

    def test_negative_base_fractional_power_overflows(self, evaluator):
        """(-8)^0.5 → NaN → OVERFLOW"""
        assert evaluator.solve("-8^0.5").error == ErrorKind.OVERFLOW

    def test_huge_power_overflows(self, evaluator):
        assert evaluator.solve("10^400").error == ErrorKind.OVERFLOW

    def test_sixteen_digit_product_overflows(self, evaluator):
        assert evaluator.solve("999999999999999*10").error == ErrorKind.OVERFLOW

    def test_missing_operand(self, evaluator):
        result = evaluator.solve("5+")

        assert result.outcome == SolveOutcome.FAILED
        assert result.error == ErrorKind.MISSING_OPERAND
        assert result.screen == MESSAGES.missing_operand_screen

    def test_missing_operand_suppressed(self, evaluator):
        result = evaluator.solve("5+", suppress_errors=True)

        assert result.outcome == SolveOutcome.NO_OP
        assert result.error is None
        assert result.screen == "5+"

    def test_suppression_does_not_hide_division_by_zero(self, evaluator):
        result = evaluator.solve("8/0", suppress_errors=True)
        assert result.error == ErrorKind.DIVISION_BY_ZERO


class TestSolveNoChange:
    """Экран без вычисления."""

    @pytest.mark.parametrize("screen", ["5", "-0", "3.25", "0"])
    def test_already_number(self, evaluator, screen):
        result = evaluator.solve(screen)

        assert result.outcome == SolveOutcome.ALREADY_NUMBER
        assert result.screen == screen
        assert result.simplified

    @pytest.mark.parametrize("screen", MESSAGES.screen_texts())
    def test_error_state_is_no_op(self, evaluator, screen):
        result = evaluator.solve(screen)

        assert result.outcome == SolveOutcome.NO_OP
        assert result.screen == screen
        assert result.error is None


class TestSolveFormatting:
    """Разделители locale и настройки форматирования."""

    def test_comma_decimal(self, evaluator):
        symbols = NumberSymbols(decimal_separator=",", grouping_separator=".")
        assert evaluator.solve("1,5+1", symbols).screen == "2,5"

    def test_grouping_enabled(self):
        evaluator = Evaluator(EngineConfig(use_grouping=True))
        assert evaluator.solve("1000*1000").screen == "1,000,000"

    def test_grouped_operands_are_parsed(self, evaluator):
        assert evaluator.solve("1,000+1").screen == "1001"

    def test_custom_messages(self):
        messages = ErrorMessages(division_by_zero_screen="Err/0")
        evaluator = Evaluator(EngineConfig(messages=messages))
        assert evaluator.solve("1/0").screen == "Err/0"

    def test_format_value_uses_config(self):
        evaluator = Evaluator(EngineConfig(max_fraction_digits=2))
        assert evaluator.format_value(3.14159) == "3.14"
        assert not evaluator.value_overflows(3.14159)
