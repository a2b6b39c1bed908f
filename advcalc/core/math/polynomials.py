"""
Polynomials — вычисление полиномов и поиск корней

Коэффициенты упорядочены от старшей степени к младшей:
    [c_0, c_1, ..., c_n]  ↔  c_0·x^n + c_1·x^(n-1) + ... + c_n

Поиск корней:
- Степень 2: замкнутая формула (дискриминант), пара real или complex-conjugate
- Иные степени: Newton-Raphson из degree начальных точек i - degree/2
  (несошедшиеся старты пропускаются, полнота и уникальность не гарантируются)
"""

import math

from advcalc.core.errors import ConvergenceError, DegenerateDerivativeError
from advcalc.core.math.calculus import (
    SOLVER_MAX_ITERATIONS_DEFAULT,
    SOLVER_TOLERANCE_DEFAULT,
    solve_equation,
)


def evaluate_polynomial(coefficients: list[float], x: float) -> float:
    """
    Значение полинома в точке x по схеме Горнера.

    Examples:
        >>> evaluate_polynomial([1.0, -3.0, 2.0], 1.0)
        0.0
        >>> evaluate_polynomial([2.0, 0.0, 0.0, 1.0], 2.0)
        17.0
    """
    result = 0.0
    for coef in coefficients:
        result = result * x + coef
    return result


def quadratic_roots(a: float, b: float, c: float) -> tuple[complex, complex]:
    """
    Корни a·x² + b·x + c = 0.

    Args:
        a: Коэффициент при x² (ненулевой)
        b: Коэффициент при x
        c: Свободный член

    Returns:
        discriminant >= 0: ((-b + √d) / 2a, (-b - √d) / 2a) с нулевой мнимой частью
        discriminant < 0:  (-b/2a + i·√(-d)/2a, -b/2a - i·√(-d)/2a)

    Raises:
        ValueError: если a == 0

    Examples:
        >>> quadratic_roots(1.0, -3.0, 2.0)
        ((2+0j), (1+0j))
        >>> quadratic_roots(1.0, 2.0, 5.0)
        ((-1+2j), (-1-2j))
    """
    if a == 0:
        raise ValueError("Leading coefficient of a quadratic must be non-zero")

    discriminant = b * b - 4 * a * c

    if discriminant >= 0:
        sqrt_d = math.sqrt(discriminant)
        return (
            complex((-b + sqrt_d) / (2 * a), 0.0),
            complex((-b - sqrt_d) / (2 * a), 0.0),
        )

    real = -b / (2 * a)
    imag = math.sqrt(-discriminant) / (2 * a)
    return (complex(real, imag), complex(real, -imag))


def find_polynomial_roots(
    coefficients: list[float] | None,
    tolerance: float = SOLVER_TOLERANCE_DEFAULT,
    max_iterations: int = SOLVER_MAX_ITERATIONS_DEFAULT,
) -> list[complex]:
    """
    Корни полинома.

    Степень 2 решается замкнутой формулой. Для остальных степеней
    Newton-Raphson запускается из точек i - degree/2, i = 0..degree-1;
    старты, не сошедшиеся (вырожденная производная, исчерпание итераций,
    переполнение), молча пропускаются. Результат может содержать дубликаты
    и не содержать часть корней.

    Args:
        coefficients: Коэффициенты от старшей степени к младшей
        tolerance: Допуск Newton-Raphson
        max_iterations: Максимум итераций Newton-Raphson на старт

    Returns:
        Список корней (complex, мнимая часть 0 для вещественных)

    Raises:
        ValueError: если coefficients пустой или None

    Examples:
        >>> sorted(r.real for r in find_polynomial_roots([1.0, -3.0, 2.0]))
        [1.0, 2.0]
        >>> find_polynomial_roots([5.0])
        []
    """
    if not coefficients:
        raise ValueError("Coefficients cannot be null or empty")

    coefficients = [float(c) for c in coefficients]
    degree = len(coefficients) - 1

    if degree == 2:
        return list(quadratic_roots(*coefficients))

    roots: list[complex] = []

    for i in range(degree):
        guess = i - degree / 2.0
        try:
            root = solve_equation(
                lambda x: evaluate_polynomial(coefficients, x),
                initial_guess=guess,
                tolerance=tolerance,
                max_iterations=max_iterations,
            )
        except (DegenerateDerivativeError, ConvergenceError, OverflowError):
            continue
        roots.append(complex(root, 0.0))

    return roots
