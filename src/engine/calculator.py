"""CalculatorEngine — владелец экрана и регистра памяти.

Экран — единственное изменяемое состояние ввода. Движок устанавливает его
только в:
- "0"
- валидное число
- валидное выражение из двух операндов
- один из трёх текстов ошибок

Каждая публичная операция атомарна: либо полностью применяется, либо
отклоняется без частичного изменения экрана и памяти. В ErrorState все
операции кроме clear() — no-op.

Сохранение состояния: snapshot() / restore() / from_state(). Движок,
восстановленный из снапшота, ведёт себя идентично исходному.
"""

import logging
from typing import Callable, Final, Optional

from src.core.domain.engine_state import EngineState
from src.core.domain.errors import ErrorKind
from src.core.domain.number_symbols import (
    NumberSymbols,
    SymbolsProvider,
    system_number_symbols,
)
from src.core.math.numerical_safeguards import safe_reciprocal, safe_sqrt
from src.core.screen.overflow import overflows
from src.core.screen.tokenizer import OPERATORS
from src.core.screen.validator import (
    expression_parts,
    is_number,
    normalize,
    parse_number,
)
from src.engine.config import EngineConfig
from src.engine.evaluator import Evaluator, SolveOutcome, SolveResult
from src.engine.keypad import KeypadAction, dispatch
from src.engine.memory import MemoryRegister

logger = logging.getLogger(__name__)

INITIAL_SCREEN: Final[str] = "0"

# Нули, которые заменяются следующей цифрой: "0" целиком или "<op>0" в конце
_PLACEHOLDER_ZERO_SUFFIXES: Final[tuple[str, ...]] = tuple(f"{op}0" for op in OPERATORS)

ErrorListener = Callable[[ErrorKind, str], None]


class CalculatorEngine:
    """Движок калькулятора с одним отложенным бинарным оператором.

    Args:
        config: конфигурация движка
        symbols_provider: источник разделителей locale, вызывается на каждой
            операции (по умолчанию — текущая locale процесса)
        on_error: вызывается с (вид ошибки, текст toast) на каждую видимую ошибку
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        symbols_provider: Optional[SymbolsProvider] = None,
        on_error: Optional[ErrorListener] = None,
    ):
        self.config = config or EngineConfig()
        self._symbols_provider = symbols_provider or system_number_symbols
        self._on_error = on_error
        self._evaluator = Evaluator(self.config)
        self.memory = MemoryRegister()
        self.last_error: Optional[ErrorKind] = None
        self._screen = INITIAL_SCREEN
        self.cursor = len(INITIAL_SCREEN)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def screen(self) -> str:
        return self._screen

    def is_error(self) -> bool:
        return self.config.messages.is_error(self._screen)

    def current_number(self) -> Optional[float]:
        """Число на экране или None, если экран не число."""
        symbols = self._symbols()
        if not is_number(self._screen, symbols):
            return None
        try:
            return parse_number(self._screen, symbols)
        except ValueError:
            return None

    def _symbols(self) -> NumberSymbols:
        return self._symbols_provider()

    def _commit(self, text: str) -> None:
        self._screen = text
        self.cursor = len(text)

    def _show_error(self, kind: ErrorKind) -> None:
        messages = self.config.messages
        self._commit(messages.screen_text(kind))
        self.last_error = kind
        logger.warning("Calculator error: %s", kind.value, extra={"error_kind": kind.value})
        if self._on_error is not None:
            self._on_error(kind, messages.toast_text(kind))

    def set_screen(self, text: str) -> bool:
        """Установка экрана с проверкой переполнения.

        Returns:
            True если текст установлен, False если показана ошибка OVERFLOW
        """
        if overflows(text, self._symbols(), self.config.max_digits):
            self._show_error(ErrorKind.OVERFLOW)
            return False
        self._commit(text)
        return True

    def _render_value(self, value: float) -> bool:
        symbols = self._symbols()
        if self._evaluator.value_overflows(value, symbols):
            self._show_error(ErrorKind.OVERFLOW)
            return False
        self._commit(self._evaluator.format_value(value, symbols))
        return True

    # =========================================================================
    # SOLVE
    # =========================================================================

    def solve(self, suppress_errors: bool = False) -> SolveResult:
        """Вычисление экрана; видимые ошибки отображаются.

        Returns:
            SolveResult (simplified=True если экран теперь число)
        """
        result = self._evaluator.solve(self._screen, self._symbols(), suppress_errors)

        if result.outcome is SolveOutcome.SOLVED:
            self._commit(result.screen)
        elif result.error is not None and result.error.is_visible:
            self._show_error(result.error)

        logger.debug("Solve %s: %s", result.outcome.value, result.details)
        return result

    def try_solve(self) -> SolveResult:
        """Вычисление без ошибки MISSING_OPERAND (перед добавлением оператора)."""
        return self.solve(suppress_errors=True)

    def equals(self) -> SolveResult:
        return self.solve()

    # =========================================================================
    # SCREEN MUTATION
    # =========================================================================

    def clear(self) -> None:
        """Сброс экрана в "0" (единственный выход из ErrorState)."""
        self._commit(INITIAL_SCREEN)
        self.last_error = None

    def append(self, text: str) -> bool:
        """Добавление текста справа.

        - "0" к экрану "0" / "-0" игнорируется
        - число, добавляемое к "0" или "<op>0", заменяет этот ноль
        - переполнение кандидата → ошибка OVERFLOW

        Returns:
            True если экран изменён на кандидата
        """
        if self.is_error():
            return False

        current = self._screen
        if text == "0" and current in ("0", "-0"):
            return False

        if is_number(text, self._symbols()):
            if current == "0" or current.endswith(_PLACEHOLDER_ZERO_SUFFIXES):
                current = current[:-1]

        return self.set_screen(current + text)

    def append_operator(self, op: str) -> bool:
        """Сворачивание готового выражения и добавление оператора.

        "5+3" затем "+" → "8+".

        Raises:
            ValueError: если op не бинарный оператор
        """
        if len(op) != 1 or op not in OPERATORS:
            raise ValueError(f"Unknown operator {op!r}, expected one of {OPERATORS!r}")

        if self.is_error():
            return False

        self.try_solve()
        return self.append(op)

    def append_decimal_point(self) -> bool:
        """Добавление десятичного разделителя к активному операнду.

        Отклоняется, если активный операнд уже содержит разделитель или
        экран заканчивается висящим оператором.
        """
        if self.is_error():
            return False

        symbols = self._symbols()
        screen = self._screen

        parts = expression_parts(screen, symbols)
        if parts is not None:
            if "." in normalize(parts.right, symbols):
                return False
            return self.append(symbols.decimal_separator)

        if is_number(screen, symbols):
            if "." in normalize(screen, symbols):
                return False
            return self.append(symbols.decimal_separator)

        return False

    def backspace(self) -> bool:
        """Удаление последнего символа; пустой экран становится "0"."""
        if self.is_error():
            return False
        self._commit(self._screen[:-1] or INITIAL_SCREEN)
        return True

    # =========================================================================
    # UNARY OPERATIONS
    # =========================================================================

    def _apply_unary(self, operation: Callable[[float], float]) -> bool:
        if self.is_error():
            return False
        self.solve()
        value = self.current_number()
        if value is None:
            return False
        return self._render_value(operation(value))

    def inverse(self) -> bool:
        """1/x (1/0 → Infinity → OVERFLOW)."""
        return self._apply_unary(safe_reciprocal)

    def percent(self) -> bool:
        """x/100."""
        return self._apply_unary(lambda value: value / 100)

    def square_root(self) -> bool:
        """sqrt(x) (отрицательное → NaN → OVERFLOW)."""
        return self._apply_unary(safe_sqrt)

    def toggle_sign(self) -> bool:
        """-x."""
        return self._apply_unary(lambda value: -value)

    # =========================================================================
    # MEMORY
    # =========================================================================

    def memory_store(self) -> bool:
        """MS: вычислить экран и сохранить число в память."""
        if self.is_error():
            return False
        self.solve()
        value = self.current_number()
        if value is None:
            return False
        return self._render_value(self.memory.store(value))

    def memory_recall(self) -> bool:
        """MR: показать значение памяти."""
        if self.is_error():
            return False
        return self._render_value(self.memory.recall())

    def memory_clear(self) -> bool:
        """MC: обнулить память и экран."""
        if self.is_error():
            return False
        self.memory.clear()
        self._commit(INITIAL_SCREEN)
        return True

    def accumulate(self, delta: float) -> bool:
        """Вычислить экран, прибавить delta к памяти, показать память.

        Память не меняется, если экран не свёлся к числу или новое значение
        переполняет экран (включая NaN/Inf): тогда показывается ошибка.
        """
        if self.is_error():
            return False
        if not self.solve().simplified:
            return False

        total = self.memory.value + delta
        if self._evaluator.value_overflows(total, self._symbols()):
            self._show_error(ErrorKind.OVERFLOW)
            return False

        return self._render_value(self.memory.accumulate(delta))

    def _memory_accumulate_screen(self, sign: float) -> bool:
        if self.is_error():
            return False
        self.solve()
        value = self.current_number()
        if value is None:
            return False
        return self.accumulate(sign * value)

    def memory_plus(self) -> bool:
        """M+: прибавить число экрана к памяти."""
        return self._memory_accumulate_screen(1.0)

    def memory_minus(self) -> bool:
        """M-: вычесть число экрана из памяти."""
        return self._memory_accumulate_screen(-1.0)

    # =========================================================================
    # KEYPAD
    # =========================================================================

    def press(self, action: KeypadAction | str) -> None:
        """Обработка нажатия кнопки.

        Raises:
            ValueError: неизвестное действие
        """
        dispatch(self, action)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def snapshot(self) -> EngineState:
        return EngineState(screen=self._screen, memory=self.memory.value)

    def restore(self, state: EngineState) -> None:
        """Восстановление экрана и памяти; пустой экран становится "0"."""
        self._commit(state.screen or INITIAL_SCREEN)
        self.memory.store(state.memory)
        self.last_error = self.config.messages.kind_of(self._screen)

    @classmethod
    def from_state(
        cls,
        state: EngineState,
        config: Optional[EngineConfig] = None,
        symbols_provider: Optional[SymbolsProvider] = None,
        on_error: Optional[ErrorListener] = None,
    ) -> "CalculatorEngine":
        engine = cls(config=config, symbols_provider=symbols_provider, on_error=on_error)
        engine.restore(state)
        return engine
