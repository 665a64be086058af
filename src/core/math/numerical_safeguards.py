"""
Numerical Safeguards — IEEE-совместимые float примитивы

Модуль обеспечивает предсказуемое поведение арифметики калькулятора:
- Деление, степень, обратное значение и корень никогда не бросают исключений
- Неопределённые операции возвращают NaN, переполнение возвращает ±Infinity
- Проверка finite значений для детекции переполнения результата

Стандартные функции Python (math.pow, math.sqrt, оператор /) бросают
ValueError / OverflowError / ZeroDivisionError там, где IEEE-754 даёт
NaN или Infinity. Вычислителю нужен именно IEEE результат: любое
не-finite значение далее отображается как ошибка Overflow.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключений для любых float входов
2. Результат либо finite, либо NaN/±Infinity по правилам IEEE-754
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

POSITIVE_INFINITY: Final[float] = math.inf
NEGATIVE_INFINITY: Final[float] = -math.inf
NOT_A_NUMBER: Final[float] = math.nan


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def _is_odd_integer(value: float) -> bool:
    return is_valid_float(value) and value.is_integer() and math.fmod(value, 2.0) != 0.0


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой вместо ZeroDivisionError.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator; при denominator == 0:
        - NaN если числитель 0 или NaN
        - ±Infinity иначе (знак по правилу знаков, учитывая -0.0)

    Examples:
        >>> ieee_divide(8.0, 2.0)
        4.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return NOT_A_NUMBER

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(POSITIVE_INFINITY, sign)


def safe_reciprocal(value: float) -> float:
    """
    Обратное значение 1/x (1/0 → +Infinity, 1/-0 → -Infinity).
    """
    return ieee_divide(1.0, value)


# =============================================================================
# IEEE СТЕПЕНЬ И КОРЕНЬ
# =============================================================================


def safe_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень с IEEE-754 семантикой.

    math.pow бросает ValueError для 0^(-n) и отрицательного основания с
    дробной степенью, и OverflowError при переполнении. Здесь эти случаи
    возвращают соответствующие NaN/Infinity.

    Args:
        base: Основание
        exponent: Показатель (любой, включая отрицательные и дробные)

    Returns:
        base ** exponent, NaN или ±Infinity

    Examples:
        >>> safe_pow(2.0, 10.0)
        1024.0
        >>> safe_pow(0.0, -1.0)
        inf
        >>> safe_pow(-8.0, 0.5)
        nan
        >>> safe_pow(10.0, 400.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # |результат| слишком велик: знак отрицательный только для
        # отрицательного основания в нечётной целой степени
        if base < 0 and _is_odd_integer(exponent):
            return NEGATIVE_INFINITY
        return POSITIVE_INFINITY
    except ValueError:
        if base == 0.0 and exponent < 0:
            # pow(-0, нечётная отрицательная) = -Infinity
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return NEGATIVE_INFINITY
            return POSITIVE_INFINITY
        # Отрицательное основание с нецелым показателем
        return NOT_A_NUMBER


def safe_sqrt(value: float) -> float:
    """
    Квадратный корень: NaN для отрицательных значений вместо ValueError.

    Examples:
        >>> safe_sqrt(16.0)
        4.0
        >>> safe_sqrt(-1.0)
        nan
    """
    if math.isnan(value) or value < 0:
        return NOT_A_NUMBER
    return math.sqrt(value)
