"""Keypad — кнопки калькулятора и их отображение на операции движка.

Каждая кнопка соответствует ровно одной операции CalculatorEngine:
- цифры 0-9 → append
- "." → append_decimal_point
- "+ - * / ^" → append_operator
- "=" → equals, "C" → clear, "BS" → backspace
- MS / MR / MC / M+ / M- → операции памяти
- 1/x, %, sqrt, +/- → унарные операции
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.engine.calculator import CalculatorEngine


class KeypadAction(str, Enum):
    """Кнопка калькулятора (значение — подпись / идентификатор кнопки)."""

    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DECIMAL_POINT = "."

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    EQUALS = "="
    CLEAR = "C"
    BACKSPACE = "BS"

    MEMORY_STORE = "MS"
    MEMORY_RECALL = "MR"
    MEMORY_CLEAR = "MC"
    MEMORY_PLUS = "M+"
    MEMORY_MINUS = "M-"

    INVERSE = "1/x"
    PERCENT = "%"
    SQUARE_ROOT = "sqrt"
    TOGGLE_SIGN = "+/-"

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def is_operator(self) -> bool:
        return self in (
            KeypadAction.ADD,
            KeypadAction.SUBTRACT,
            KeypadAction.MULTIPLY,
            KeypadAction.DIVIDE,
            KeypadAction.POWER,
        )


_SIMPLE_ACTIONS = {
    KeypadAction.DECIMAL_POINT: "append_decimal_point",
    KeypadAction.EQUALS: "equals",
    KeypadAction.CLEAR: "clear",
    KeypadAction.BACKSPACE: "backspace",
    KeypadAction.MEMORY_STORE: "memory_store",
    KeypadAction.MEMORY_RECALL: "memory_recall",
    KeypadAction.MEMORY_CLEAR: "memory_clear",
    KeypadAction.MEMORY_PLUS: "memory_plus",
    KeypadAction.MEMORY_MINUS: "memory_minus",
    KeypadAction.INVERSE: "inverse",
    KeypadAction.PERCENT: "percent",
    KeypadAction.SQUARE_ROOT: "square_root",
    KeypadAction.TOGGLE_SIGN: "toggle_sign",
}


def dispatch(engine: "CalculatorEngine", action: "KeypadAction | str") -> None:
    """Выполнение операции движка для нажатой кнопки.

    Args:
        engine: движок калькулятора
        action: KeypadAction или его строковое значение

    Raises:
        ValueError: неизвестная кнопка
    """
    action = KeypadAction(action)

    if action.is_digit:
        engine.append(action.value)
    elif action.is_operator:
        engine.append_operator(action.value)
    else:
        getattr(engine, _SIMPLE_ACTIONS[action])()
