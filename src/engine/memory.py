"""Memory Register — единственный скалярный регистр памяти калькулятора."""

import logging

logger = logging.getLogger(__name__)


class MemoryRegister:
    """Регистр памяти (double), инициализируется 0.0.

    Изменяется только store/accumulate/clear; с экраном связан лишь через
    явные операции CalculatorEngine.
    """

    def __init__(self, value: float = 0.0):
        self.value = float(value)

    def store(self, value: float) -> float:
        self.value = float(value)
        logger.debug("Memory stored: %r", self.value)
        return self.value

    def accumulate(self, delta: float) -> float:
        """M+ / M-: прибавление delta (отрицательного для M-)."""
        self.value += delta
        logger.debug("Memory accumulated %r -> %r", delta, self.value)
        return self.value

    def recall(self) -> float:
        return self.value

    def clear(self) -> None:
        self.value = 0.0
        logger.debug("Memory cleared")
