"""Calculator configuration — параметры численных методов и вывода.

Значения по умолчанию совпадают с константами core.math.calculus.
"""

from dataclasses import dataclass

from advcalc.core.math.calculus import (
    DERIVATIVE_STEP,
    INTEGRAL_STEPS_DEFAULT,
    SOLVER_MAX_ITERATIONS_DEFAULT,
    SOLVER_TOLERANCE_DEFAULT,
)
from advcalc.core.math.numerical_safeguards import (
    validate_non_negative_int,
    validate_positive,
    validate_positive_int,
)


@dataclass(frozen=True)
class CalculusConfig:
    """Конфигурация численных методов.

    - derivative_step: шаг центральной разности
    - integral_steps: число интервалов Симпсона
    - solver_tolerance: допуск сходимости Newton-Raphson
    - solver_max_iterations: максимум итераций Newton-Raphson
    """
    derivative_step: float = DERIVATIVE_STEP
    integral_steps: int = INTEGRAL_STEPS_DEFAULT
    solver_tolerance: float = SOLVER_TOLERANCE_DEFAULT
    solver_max_iterations: int = SOLVER_MAX_ITERATIONS_DEFAULT

    def __post_init__(self):
        validate_positive(self.derivative_step, "derivative_step")
        validate_positive_int(self.integral_steps, "integral_steps")
        validate_positive(self.solver_tolerance, "solver_tolerance")
        validate_positive_int(self.solver_max_iterations, "solver_max_iterations")


@dataclass(frozen=True)
class DisplayConfig:
    """Конфигурация консольного вывода (знаков после запятой)."""
    statistics_decimals: int = 4
    matrix_decimals: int = 2

    def __post_init__(self):
        validate_non_negative_int(self.statistics_decimals, "statistics_decimals")
        validate_non_negative_int(self.matrix_decimals, "matrix_decimals")
