"""
EngineConfig — конфигурация движка калькулятора
"""

from dataclasses import dataclass, field

from src.core.domain.errors import ErrorMessages
from src.core.math.number_format import MAX_DIGITS, MAX_FRACTION_DIGITS


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    - max_digits: лимит цифр числа / операнда (OverflowLimit)
    - max_fraction_digits: стартовая ёмкость дробной части форматирования
    - use_grouping: разделители групп в отображаемых результатах
    - messages: тексты ошибок (поставляются хостом)
    """

    max_digits: int = MAX_DIGITS
    max_fraction_digits: int = MAX_FRACTION_DIGITS
    use_grouping: bool = False
    messages: ErrorMessages = field(default_factory=ErrorMessages)

    def __post_init__(self):
        if self.max_digits < 1:
            raise ValueError(f"max_digits must be >= 1, got {self.max_digits}")
        if self.max_fraction_digits < 0:
            raise ValueError(
                f"max_fraction_digits must be >= 0, got {self.max_fraction_digits}"
            )
