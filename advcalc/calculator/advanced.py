"""AdvancedCalculator — фасад над численным ядром.

- Каждая операция выполняется через perform_operation (логирование старта,
  результата и ошибок; ошибки пробрасываются без обработки)
- Параметры численных методов берутся из CalculusConfig
- calculate_async выносит одно вычисление в worker thread
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Optional, TypeVar

from advcalc.calculator.config import CalculusConfig, DisplayConfig
from advcalc.core.domain.statistics import DescriptiveStatistics
from advcalc.core.math import calculus, descriptive, polynomials, sequences
from advcalc.core.math.matrix import Matrix, multiply_matrices
from advcalc.core.math.operations import get_operation

logger = logging.getLogger(__name__)

T = TypeVar("T")
TInput = TypeVar("TInput")


class AdvancedCalculator:
    """Калькулятор: арифметика, анализ, полиномы, матрицы, статистика.

    Stateless относительно вычислений: между вызовами хранится только
    конфигурация.
    """

    def __init__(
        self,
        calculus_config: Optional[CalculusConfig] = None,
        display_config: Optional[DisplayConfig] = None,
    ):
        """
        Args:
            calculus_config: параметры численных методов
            display_config: параметры форматирования вывода
        """
        self.calculus_config = calculus_config or CalculusConfig()
        self.display_config = display_config or DisplayConfig()

    # -------------------------------------------------------------------------
    # Execution wrapper
    # -------------------------------------------------------------------------

    def perform_operation(self, operation: Callable[[], T], operation_name: str = "") -> T:
        """Выполнение операции с логированием.

        Исключения логируются на уровне ERROR и пробрасываются дальше.
        """
        logger.info("Executing operation: %s", operation_name)
        try:
            result = operation()
        except Exception as e:
            logger.error("Error in %s: %s", operation_name, e)
            raise
        logger.info("Operation completed successfully. Result: %s", result)
        return result

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def calculate(self, a: float, symbol: str, b: float) -> float:
        """Бинарная операция из реестра ("+", "-", "*", "/", "^", "log")."""
        operation = get_operation(symbol)
        return self.perform_operation(lambda: operation.execute(a, b), operation.name)

    def transform_data(
        self,
        value: TInput,
        transformer: Callable[[TInput], T],
        validator: Callable[[TInput], bool] | None = None,
    ) -> T:
        return self.perform_operation(
            lambda: sequences.transform_data(value, transformer, validator),
            "Data Transformation",
        )

    # -------------------------------------------------------------------------
    # Calculus
    # -------------------------------------------------------------------------

    def calculate_derivative(self, function: Callable[[float], float], x: float) -> float:
        return self.perform_operation(
            lambda: calculus.derivative(function, x, self.calculus_config.derivative_step),
            "Derivative Calculation",
        )

    def calculate_integral(
        self,
        function: Callable[[float], float],
        a: float,
        b: float,
        steps: int | None = None,
    ) -> float:
        steps = self.calculus_config.integral_steps if steps is None else steps
        return self.perform_operation(
            lambda: calculus.integral(function, a, b, steps),
            "Integral Calculation",
        )

    def solve_equation(
        self,
        equation: Callable[[float], float],
        initial_guess: float = 0.0,
        tolerance: float | None = None,
        max_iterations: int | None = None,
    ) -> float:
        config = self.calculus_config
        return self.perform_operation(
            lambda: calculus.solve_equation(
                equation,
                initial_guess=initial_guess,
                tolerance=config.solver_tolerance if tolerance is None else tolerance,
                max_iterations=(
                    config.solver_max_iterations if max_iterations is None else max_iterations
                ),
                h=config.derivative_step,
            ),
            "Equation Solving",
        )

    def find_polynomial_roots(self, coefficients: list[float] | None) -> list[complex]:
        return self.perform_operation(
            lambda: polynomials.find_polynomial_roots(
                coefficients,
                tolerance=self.calculus_config.solver_tolerance,
                max_iterations=self.calculus_config.solver_max_iterations,
            ),
            "Polynomial Roots Calculation",
        )

    # -------------------------------------------------------------------------
    # Matrices
    # -------------------------------------------------------------------------

    def multiply_matrices(self, a: Matrix, b: Matrix) -> Matrix:
        return self.perform_operation(lambda: multiply_matrices(a, b), "Matrix Multiplication")

    def format_matrix(self, matrix: Matrix) -> str:
        return matrix.format(self.display_config.matrix_decimals)

    # -------------------------------------------------------------------------
    # Sequences
    # -------------------------------------------------------------------------

    def factorial(self, n: int) -> int:
        return self.perform_operation(lambda: sequences.factorial(n), "Factorial")

    def fibonacci_sequence(self, count: int) -> list[int]:
        return self.perform_operation(
            lambda: sequences.fibonacci_sequence(count), "Fibonacci Sequence"
        )

    def generate_sequence(
        self,
        start: float,
        generator: Callable[[float], float],
        count: int,
        predicate: Callable[[float], bool] | None = None,
    ) -> list[float]:
        return sequences.generate_sequence(start, generator, count, predicate)

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def median(self, values: Iterable[float]) -> float:
        return descriptive.median(values)

    def standard_deviation(self, values: Iterable[float]) -> float:
        return descriptive.standard_deviation(values)

    def moving_average(self, values: Iterable[float], window_size: int) -> Iterator[float]:
        return descriptive.moving_average(values, window_size)

    def calculate_descriptive_statistics(self, data: Iterable[float]) -> DescriptiveStatistics:
        data = list(data)
        return self.perform_operation(
            lambda: descriptive.describe(data), "Descriptive Statistics"
        )

    def format_statistics(self, stats: DescriptiveStatistics) -> list[str]:
        return stats.format_lines(self.display_config.statistics_decimals)

    # -------------------------------------------------------------------------
    # Async offload
    # -------------------------------------------------------------------------

    async def calculate_async(self, calculation: Callable[[], T]) -> T:
        """Выполнение calculation в worker thread.

        Отмена не поддерживается: задача в потоке выполняется до конца.
        """

        def run() -> T:
            logger.debug("Starting async calculation...")
            result = calculation()
            logger.debug("Async calculation completed")
            return result

        return await asyncio.to_thread(run)
