"""
Ошибки калькулятора — виды ошибок и тексты сообщений

Три видимых вида ошибок (MISSING_OPERAND, DIVISION_BY_ZERO, OVERFLOW)
переводят экран в ErrorState; выйти из него можно только через Clear.
PARSE_ERROR — тихий вид: никогда не отображается и не меняет экран.

Локализованный текст поставляет хост через ErrorMessages; ядро сообщает
только вид ошибки.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки вычисления (значение — ключ сообщения)."""

    MISSING_OPERAND = "MISSING_OPERAND"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OVERFLOW = "OVERFLOW"
    PARSE_ERROR = "PARSE_ERROR"

    @property
    def is_visible(self) -> bool:
        """True если ошибка отображается на экране."""
        return self is not ErrorKind.PARSE_ERROR


@dataclass(frozen=True)
class ErrorMessages:
    """Тексты ошибок: короткая форма для экрана и длинная для toast.

    Экранные тексты должны быть различны: по ним экран распознаётся как
    ErrorState.
    """

    missing_operand_screen: str = "Error: missing operand"
    missing_operand_toast: str = "Enter a second number after the operator"
    division_by_zero_screen: str = "Error: division by zero"
    division_by_zero_toast: str = "Cannot divide by zero"
    overflow_screen: str = "Error: overflow"
    overflow_toast: str = "The number is too large to display"

    def __post_init__(self):
        screens = self.screen_texts()
        if any(not text for text in screens):
            raise ValueError("Error screen texts must be non-empty")
        if len(set(screens)) != len(screens):
            raise ValueError(f"Error screen texts must be distinct, got {screens}")

    def screen_texts(self) -> tuple[str, str, str]:
        return (
            self.missing_operand_screen,
            self.division_by_zero_screen,
            self.overflow_screen,
        )

    def screen_text(self, kind: ErrorKind) -> str:
        """Короткий текст ошибки для экрана.

        Raises:
            ValueError: для PARSE_ERROR (тихая ошибка без текста)
        """
        if kind is ErrorKind.MISSING_OPERAND:
            return self.missing_operand_screen
        if kind is ErrorKind.DIVISION_BY_ZERO:
            return self.division_by_zero_screen
        if kind is ErrorKind.OVERFLOW:
            return self.overflow_screen
        raise ValueError(f"{kind.value} has no screen text")

    def toast_text(self, kind: ErrorKind) -> str:
        """Развёрнутое пояснение ошибки для toast.

        Raises:
            ValueError: для PARSE_ERROR (тихая ошибка без текста)
        """
        if kind is ErrorKind.MISSING_OPERAND:
            return self.missing_operand_toast
        if kind is ErrorKind.DIVISION_BY_ZERO:
            return self.division_by_zero_toast
        if kind is ErrorKind.OVERFLOW:
            return self.overflow_toast
        raise ValueError(f"{kind.value} has no toast text")

    def is_error(self, screen: str) -> bool:
        """True если экран показывает одну из ошибок."""
        return screen in self.screen_texts()

    def kind_of(self, screen: str) -> ErrorKind | None:
        """Вид ошибки, отображаемой на экране, или None."""
        for kind in (ErrorKind.MISSING_OPERAND, ErrorKind.DIVISION_BY_ZERO, ErrorKind.OVERFLOW):
            if screen == self.screen_text(kind):
                return kind
        return None
