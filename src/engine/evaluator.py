"""Evaluator — сведение текста экрана к одному отформатированному числу.

Машина состояний solve(screen, suppress_errors):
1. Экран в ErrorState → NO_OP
2. Экран — число → ALREADY_NUMBER (без изменений)
3. Экран — выражение "A op B":
   a. оператор = подстрока между операндами (по длинам операндов)
   b. парсинг операндов; ошибка парсинга → FAILED(PARSE_ERROR) тихо
   c. "+" "-" "*" "/" "^"; деление на точный 0.0 → FAILED(DIVISION_BY_ZERO)
   d. переполнение результата (включая NaN/Inf) → FAILED(OVERFLOW),
      иначе SOLVED с отформатированным результатом
4. Иначе (висящий оператор и т.п.):
   suppress_errors=False → FAILED(MISSING_OPERAND), True → NO_OP

Evaluator не хранит состояние экрана: результат содержит новый текст экрана,
применяет его CalculatorEngine.
"""

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

from src.core.domain.errors import ErrorKind
from src.core.domain.number_symbols import DEFAULT_SYMBOLS, NumberSymbols
from src.core.math.number_format import format_number
from src.core.math.numerical_safeguards import ieee_divide, safe_pow
from src.core.screen.overflow import overflows_value
from src.core.screen.tokenizer import TwoPart, operator_between
from src.core.screen.validator import expression_parts, is_number, parse_number
from src.engine.config import EngineConfig

logger = logging.getLogger(__name__)


# =============================================================================
# OUTCOME
# =============================================================================


class SolveOutcome(str, Enum):
    """Исход вычисления экрана."""

    ALREADY_NUMBER = "ALREADY_NUMBER"
    SOLVED = "SOLVED"
    FAILED = "FAILED"
    NO_OP = "NO_OP"


@dataclass(frozen=True)
class SolveResult:
    """Результат solve."""

    outcome: SolveOutcome

    # Текст экрана после вычисления (равен исходному при NO_OP,
    # ALREADY_NUMBER и PARSE_ERROR)
    screen: str

    error: Optional[ErrorKind]

    # Детали
    details: str

    @property
    def simplified(self) -> bool:
        """True если экран — число (уже был или стал после вычисления)."""
        return self.outcome in (SolveOutcome.ALREADY_NUMBER, SolveOutcome.SOLVED)


# =============================================================================
# OPERATORS
# =============================================================================

# Нулевой делитель проверяется до вызова операции
_BINARY_OPERATIONS: Final[dict[str, Callable[[float, float], float]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": ieee_divide,
    "^": safe_pow,
}


# =============================================================================
# EVALUATOR
# =============================================================================


class Evaluator:
    """Solver выражений экрана из двух операндов."""

    def __init__(self, config: EngineConfig | None = None):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
        """
        self.config = config or EngineConfig()

    def format_value(self, value: float, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> str:
        """Форматирование значения по настройкам движка."""
        return format_number(
            value,
            symbols,
            max_fraction_digits=self.config.max_fraction_digits,
            max_digits=self.config.max_digits,
            use_grouping=self.config.use_grouping,
        )

    def value_overflows(self, value: float, symbols: NumberSymbols = DEFAULT_SYMBOLS) -> bool:
        """Переполнение значения после форматирования (NaN/Inf — всегда)."""
        return overflows_value(
            value,
            symbols,
            max_digits=self.config.max_digits,
            max_fraction_digits=self.config.max_fraction_digits,
            use_grouping=self.config.use_grouping,
        )

    def solve(
        self,
        screen: str,
        symbols: NumberSymbols = DEFAULT_SYMBOLS,
        suppress_errors: bool = False,
    ) -> SolveResult:
        """Вычисление экрана.

        Args:
            screen: текущий текст экрана
            symbols: разделители locale
            suppress_errors: не сообщать MISSING_OPERAND (режим trySolve)

        Returns:
            SolveResult с исходом и новым текстом экрана
        """
        messages = self.config.messages

        # 1. ErrorState: всё кроме Clear игнорируется
        if messages.is_error(screen):
            return SolveResult(
                outcome=SolveOutcome.NO_OP,
                screen=screen,
                error=None,
                details="Screen is in error state",
            )

        # 2. Уже число
        if is_number(screen, symbols):
            return SolveResult(
                outcome=SolveOutcome.ALREADY_NUMBER,
                screen=screen,
                error=None,
                details="Screen is already a number",
            )

        # 3. Выражение
        parts = expression_parts(screen, symbols)
        if parts is not None:
            return self._solve_expression(screen, parts, symbols)

        # 4. Ни число, ни выражение
        if suppress_errors:
            return SolveResult(
                outcome=SolveOutcome.NO_OP,
                screen=screen,
                error=None,
                details=f"Incomplete expression {screen!r} left as is",
            )

        return self._failure(ErrorKind.MISSING_OPERAND, f"Missing operand in {screen!r}")

    def _solve_expression(
        self,
        screen: str,
        parts: TwoPart,
        symbols: NumberSymbols,
    ) -> SolveResult:
        op = operator_between(screen, parts)
        operation = _BINARY_OPERATIONS.get(op)

        try:
            a = parse_number(parts.left, symbols)
            b = parse_number(parts.right, symbols)
        except ValueError as e:
            return self._silent_parse_error(screen, f"Operand parse failed: {e}")

        if operation is None:
            return self._silent_parse_error(screen, f"Unknown operator {op!r}")

        if op == "/" and b == 0.0:
            return self._failure(ErrorKind.DIVISION_BY_ZERO, f"Division by zero in {screen!r}")

        result = operation(a, b)

        if self.value_overflows(result, symbols):
            return self._failure(
                ErrorKind.OVERFLOW, f"Result of {screen!r} overflows: {result!r}"
            )

        rendered = self.format_value(result, symbols)
        logger.debug("Solved %r -> %r", screen, rendered)
        return SolveResult(
            outcome=SolveOutcome.SOLVED,
            screen=rendered,
            error=None,
            details=f"{screen} = {rendered}",
        )

    def _failure(self, kind: ErrorKind, details: str) -> SolveResult:
        return SolveResult(
            outcome=SolveOutcome.FAILED,
            screen=self.config.messages.screen_text(kind),
            error=kind,
            details=details,
        )

    def _silent_parse_error(self, screen: str, details: str) -> SolveResult:
        logger.debug("Swallowed parse error for %r: %s", screen, details)
        return SolveResult(
            outcome=SolveOutcome.FAILED,
            screen=screen,
            error=ErrorKind.PARSE_ERROR,
            details=details,
        )
