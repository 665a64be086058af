"""
Tokenizer — разбиение текста экрана на два операнда

Правила (в порядке приоритета):
1. Текст содержит любой из "+*/^": ровно одно вхождение такого символа на
   весь текст, разбиение по нему. Два и более (даже разных) → не разбивается.
2. Иначе текст содержит "-": n = количество "-"
   - n == 1: разбиение по этому "-"
   - n == 2 или 3: "-" может быть унарным знаком операнда ("-3--2", "3--2").
     Разбиение по ВТОРОМУ "-" слева: левая часть (включая ведущий "-")
     становится операндом A, остаток после него — операндом B.
     Если второй "-" стоит сразу за первым ("3--2"), разбиение по первому:
     второй "-" — знак операнда B.
   - иначе: не разбивается
3. Операторов нет: не разбивается (кандидат в обычное число)

Второе правило — единственное правило различения бинарного и унарного минуса.
Реализовано явным сканированием со счётчиком, без регулярных выражений.
"""

from typing import Final, NamedTuple, Optional

# Бинарные операторы экрана
OPERATORS: Final[str] = "+-*/^"

# Операторы, однозначно бинарные (правило 1)
NON_MINUS_OPERATORS: Final[str] = "+*/^"

MINUS: Final[str] = "-"


class TwoPart(NamedTuple):
    """Два операнда выражения (оператор исключён).

    Операнды могут быть пустыми ("5+" → ("5", "")): пустой операнд
    отклоняется валидатором, а не токенизатором.
    """

    left: str
    right: str


def _split_at(text: str, index: int) -> TwoPart:
    return TwoPart(text[:index], text[index + 1:])


def _split_minus(text: str) -> Optional[TwoPart]:
    count = text.count(MINUS)

    if count == 1:
        return _split_at(text, text.index(MINUS))

    if count in (2, 3):
        previous = -1
        for index, ch in enumerate(text):
            if ch != MINUS:
                continue
            if previous >= 0:
                # "<A>--<B>": второй "-" сразу за первым является знаком операнда B
                if index == previous + 1:
                    return _split_at(text, previous)
                return _split_at(text, index)
            previous = index

    return None


def split_expression(text: str) -> Optional[TwoPart]:
    """
    Разбиение текста на два операнда.

    Args:
        text: Текст экрана

    Returns:
        TwoPart(left, right) или None если текст не разбивается ровно на два

    Examples:
        >>> split_expression("3--2")
        TwoPart(left='3', right='-2')
        >>> split_expression("-3-2")
        TwoPart(left='-3', right='2')
        >>> split_expression("5+-3")
        TwoPart(left='5', right='-3')
        >>> split_expression("5+3*2") is None
        True
    """
    positions = [index for index, ch in enumerate(text) if ch in NON_MINUS_OPERATORS]
    if positions:
        if len(positions) == 1:
            return _split_at(text, positions[0])
        return None

    if MINUS in text:
        return _split_minus(text)

    return None


def operator_between(text: str, parts: TwoPart) -> str:
    """
    Оператор выражения: подстрока между операндами.

    Восстанавливается по длинам операндов, а не повторным разбором, поэтому
    совпадает с решением split_expression.

    Examples:
        >>> operator_between("-3--2", TwoPart("-3", "-2"))
        '-'
    """
    return text[len(parts.left): len(text) - len(parts.right)]
