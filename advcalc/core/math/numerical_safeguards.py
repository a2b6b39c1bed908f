"""
Numerical Safeguards — Safe Math Primitives

Модуль содержит общие epsilon-параметры и проверки входных данных для
численных алгоритмов ядра:
- Epsilon-параметры (деление, сравнения float)
- Проверка на NaN/Inf
- Epsilon-сравнения float с учётом машинной точности
- Валидация параметров алгоритмов (шаги, допуски, счётчики)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидные параметры отвергаются ДО начала вычислений (ValueError)
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Наименьшее положительное (субнормальное) double
# Делитель с abs < EPS_DIVISION считается нулём
EPS_DIVISION: Final[float] = math.ulp(0.0)

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


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


def is_below_epsilon(value: float, eps: float = EPS_DIVISION) -> bool:
    """
    Проверка, что abs(value) строго меньше eps.

    Используется для детекции нулевого делителя и вырожденной производной.

    Examples:
        >>> is_below_epsilon(0.0)
        True
        >>> is_below_epsilon(-0.0)
        True
        >>> is_below_epsilon(1e-300)
        False
        >>> is_below_epsilon(1e-11, eps=1e-10)
        True
    """
    return abs(value) < eps


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация счётчиков (шаги, итерации, размер окна).

    Raises:
        ValueError: Если value <= 0
    """
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация неотрицательных счётчиков (размерности, длины).

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
