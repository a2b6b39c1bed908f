"""
Calculus — численное дифференцирование, интегрирование и решение уравнений

Алгоритмы:
- Центральная разность:  f'(x) ≈ (f(x + h) - f(x - h)) / (2h), h = 1e-8
- Формула Симпсона:      ∫f ≈ h/3 * [f(a) + 4f(x_1) + 2f(x_2) + ... + 4f(x_{n-1}) + f(b)]
- Newton-Raphson:        x_{k+1} = x_k - f(x_k) / f'(x_k)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нечётное число шагов Симпсона увеличивается на 1 (метод требует пар интервалов)
2. Newton-Raphson прерывается при |f'(x)| < tolerance (DegenerateDerivativeError)
3. Сходимость: |x_new - x| < tolerance → возвращается x_new
4. Исчерпание max_iterations → ConvergenceError
"""

from collections.abc import Callable
from typing import Final

from advcalc.core.errors import ConvergenceError, DegenerateDerivativeError
from advcalc.core.math.numerical_safeguards import (
    is_below_epsilon,
    validate_positive,
    validate_positive_int,
)

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Шаг центральной разности
DERIVATIVE_STEP: Final[float] = 1e-8

# Число интервалов формулы Симпсона
INTEGRAL_STEPS_DEFAULT: Final[int] = 1000

# Допуск сходимости Newton-Raphson (и порог вырожденной производной)
SOLVER_TOLERANCE_DEFAULT: Final[float] = 1e-10

# Максимум итераций Newton-Raphson
SOLVER_MAX_ITERATIONS_DEFAULT: Final[int] = 1000


RealFunction = Callable[[float], float]


# =============================================================================
# DERIVATIVE
# =============================================================================


def derivative(f: RealFunction, x: float, h: float = DERIVATIVE_STEP) -> float:
    """
    Производная f в точке x через центральную разность.

    Защиты от катастрофического сокращения нет, кроме фиксированного шага.

    Args:
        f: Вещественная функция одной переменной
        x: Точка дифференцирования
        h: Шаг разности (default: 1e-8)

    Returns:
        (f(x + h) - f(x - h)) / (2h)

    Examples:
        >>> abs(derivative(lambda x: x ** 3 + 2 * x, 2.0) - 14.0) < 1e-3
        True
    """
    return (f(x + h) - f(x - h)) / (2 * h)


# =============================================================================
# INTEGRAL
# =============================================================================


def integral(
    f: RealFunction,
    a: float,
    b: float,
    steps: int = INTEGRAL_STEPS_DEFAULT,
) -> float:
    """
    Определённый интеграл f на [a, b] по составной формуле Симпсона.

    Веса: 1 на концах, 4 для нечётных внутренних узлов, 2 для чётных.

    Args:
        f: Вещественная функция одной переменной
        a: Нижний предел
        b: Верхний предел
        steps: Число интервалов (нечётное увеличивается до чётного)

    Returns:
        h/3 * взвешенная сумма, h = (b - a) / steps

    Raises:
        ValueError: если steps <= 0

    Examples:
        >>> abs(integral(lambda x: x * x, 0.0, 1.0) - 1.0 / 3.0) < 1e-4
        True
    """
    validate_positive_int(steps, "steps")

    if steps % 2 != 0:
        steps += 1

    h = (b - a) / steps
    total = f(a) + f(b)

    for i in range(1, steps):
        weight = 2 if i % 2 == 0 else 4
        total += weight * f(a + i * h)

    return total * h / 3


# =============================================================================
# NEWTON-RAPHSON
# =============================================================================


def solve_equation(
    f: RealFunction,
    initial_guess: float = 0.0,
    tolerance: float = SOLVER_TOLERANCE_DEFAULT,
    max_iterations: int = SOLVER_MAX_ITERATIONS_DEFAULT,
    h: float = DERIVATIVE_STEP,
) -> float:
    """
    Корень уравнения f(x) = 0 методом Newton-Raphson.

    Наклон берётся из derivative() с шагом h.

    Args:
        f: Вещественная функция одной переменной
        initial_guess: Начальное приближение
        tolerance: Допуск сходимости и порог вырожденной производной
        max_iterations: Максимум итераций
        h: Шаг центральной разности

    Returns:
        x_new при |x_new - x| < tolerance

    Raises:
        DegenerateDerivativeError: |f'(x)| < tolerance
        ConvergenceError: сходимость не достигнута за max_iterations
        ValueError: tolerance <= 0 или max_iterations <= 0

    Examples:
        >>> abs(solve_equation(lambda x: x * x - 4, initial_guess=1.0) - 2.0) < 1e-6
        True
    """
    validate_positive(tolerance, "tolerance")
    validate_positive_int(max_iterations, "max_iterations")

    x = initial_guess

    for _ in range(max_iterations):
        fx = f(x)
        slope = derivative(f, x, h)

        if is_below_epsilon(slope, tolerance):
            raise DegenerateDerivativeError(
                f"Derivative too small at x={x!r}: |f'(x)|={abs(slope):.3e} < {tolerance:.3e}"
            )

        x_new = x - fx / slope

        if abs(x_new - x) < tolerance:
            return x_new

        x = x_new

    raise ConvergenceError(
        f"Maximum iterations reached ({max_iterations}) "
        f"starting from initial_guess={initial_guess!r}, last x={x!r}"
    )
