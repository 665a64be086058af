"""Engine — движок калькулятора: вычислитель, регистр памяти, экран и кнопки.

- Evaluator: сведение выражения "A op B" к отформатированному числу
- MemoryRegister: единственный скалярный регистр памяти
- CalculatorEngine: владелец экрана, примитивы изменения экрана, снапшоты
- KeypadAction: поверхность кнопок хоста
"""

from .calculator import INITIAL_SCREEN, CalculatorEngine, ErrorListener
from .config import EngineConfig
from .evaluator import Evaluator, SolveOutcome, SolveResult
from .keypad import KeypadAction, dispatch
from .memory import MemoryRegister

__all__ = [
    "INITIAL_SCREEN",
    "CalculatorEngine",
    "ErrorListener",
    "EngineConfig",
    "Evaluator",
    "SolveOutcome",
    "SolveResult",
    "KeypadAction",
    "dispatch",
    "MemoryRegister",
]
