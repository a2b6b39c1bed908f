"""
Console demonstration of the calculator.

Each section calls the calculator and writes formatted lines through `echo`.
`build_report` returns the same results as a JSON-ready dict whose matrix and
statistics parts are checked against the JSON contracts.
"""

import asyncio
import math
import time
from collections.abc import Callable
from typing import Any

from advcalc.calculator import AdvancedCalculator
from advcalc.core.contracts import validate_descriptive_statistics, validate_matrix
from advcalc.core.math.matrix import Matrix
from advcalc.core.math.operations import OPERATIONS

Echo = Callable[[str], None]

MATRIX_A = [[1.0, 2.0], [3.0, 4.0]]
MATRIX_B = [[5.0, 6.0], [7.0, 8.0]]
STATISTICS_SAMPLE = [1.2, 2.3, 3.4, 4.5, 5.6, 6.7, 7.8, 8.9, 9.0, 10.1]
QUADRATIC_COEFFICIENTS = [1.0, -3.0, 2.0]  # x² - 3x + 2
FIBONACCI_COUNT = 15
ASYNC_DELAY_SEC = 1.0


def _circle_area(radius: float, delay: float) -> float:
    time.sleep(delay)  # simulated heavy work
    return math.pi * radius ** 2


def _format_root(root: complex) -> str:
    return f"({root.real:g}, {root.imag:g})"


def _join(values) -> str:
    return ", ".join(f"{v:g}" if isinstance(v, float) else str(v) for v in values)


def demonstrate_basic_operations(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== BASIC OPERATIONS ===")

    for symbol, operation in OPERATIONS.items():
        result = calculator.calculate(8.0, symbol, 2.0)
        echo(f"{operation.name}: 8 {symbol} 2 = {result:g}")

    transformed = calculator.transform_data(5.0, lambda x: x * x + 2 * x + 1)
    echo(f"Quadratic transform: {transformed}")

    echo(f"Factorial of 20: {calculator.factorial(20)}")
    echo("")


def demonstrate_advanced_calculations(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== ADVANCED CALCULATIONS ===")

    derivative = calculator.calculate_derivative(lambda x: x * x * x + 2 * x, 2.0)
    echo(f"Derivative at x=2: {derivative:.4f}")

    integral = calculator.calculate_integral(lambda x: x * x, 0.0, 1.0)
    echo(f"Integral of x² from 0 to 1: {integral:.4f}")

    root = calculator.solve_equation(lambda x: x * x - 4, initial_guess=1.0)
    echo(f"Root of x² - 4 = 0: {root:.4f}")

    echo("Polynomial roots:")
    for complex_root in calculator.find_polynomial_roots(QUADRATIC_COEFFICIENTS):
        echo(f"  {_format_root(complex_root)}")
    echo("")


def demonstrate_matrix_operations(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== MATRIX OPERATIONS ===")

    product = calculator.multiply_matrices(Matrix.from_rows(MATRIX_A), Matrix.from_rows(MATRIX_B))
    echo("Matrix multiplication result:")
    echo(calculator.format_matrix(product))
    echo("")


def demonstrate_sequence_generation(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== SEQUENCE GENERATION ===")

    squares = calculator.generate_sequence(1.0, lambda x: x * x, 10, lambda x: x % 2 == 0)
    echo("Filtered squares: " + _join(squares))

    numbers = [float(n) for n in range(1, 11)]
    echo("Moving average: " + _join(calculator.moving_average(numbers, 3)))
    echo("")


def demonstrate_async_operations(
    calculator: AdvancedCalculator, echo: Echo, delay: float = ASYNC_DELAY_SEC
) -> None:
    echo("=== ASYNC OPERATIONS ===")

    area = asyncio.run(calculator.calculate_async(lambda: _circle_area(10.0, delay)))
    echo(f"Async area calculation: {area:.4f}")
    echo("")


def demonstrate_statistics(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== STATISTICS ===")

    stats = calculator.calculate_descriptive_statistics(STATISTICS_SAMPLE)
    for line in calculator.format_statistics(stats):
        echo(line)
    echo("")


def demonstrate_fibonacci(calculator: AdvancedCalculator, echo: Echo) -> None:
    echo("=== FIBONACCI SEQUENCE ===")

    fibonacci = calculator.fibonacci_sequence(FIBONACCI_COUNT)
    echo(f"First {FIBONACCI_COUNT} Fibonacci numbers: " + _join(fibonacci))
    echo("")


def run_demo(
    calculator: AdvancedCalculator, echo: Echo, async_delay: float = ASYNC_DELAY_SEC
) -> None:
    """Run every demonstration section in order."""
    demonstrate_basic_operations(calculator, echo)
    demonstrate_advanced_calculations(calculator, echo)
    demonstrate_matrix_operations(calculator, echo)
    demonstrate_sequence_generation(calculator, echo)
    demonstrate_async_operations(calculator, echo, async_delay)
    demonstrate_statistics(calculator, echo)
    demonstrate_fibonacci(calculator, echo)


def build_report(
    calculator: AdvancedCalculator, async_delay: float = ASYNC_DELAY_SEC
) -> dict[str, Any]:
    """
    Demonstration results as a JSON-ready dict.

    Raises:
        jsonschema.ValidationError: matrix or statistics part breaks its contract
    """
    product = calculator.multiply_matrices(Matrix.from_rows(MATRIX_A), Matrix.from_rows(MATRIX_B))
    stats = calculator.calculate_descriptive_statistics(STATISTICS_SAMPLE)

    matrix_payload = product.to_payload()
    stats_payload = stats.model_dump()
    validate_matrix(matrix_payload)
    validate_descriptive_statistics(stats_payload)

    return {
        "operations": {
            symbol: calculator.calculate(8.0, symbol, 2.0) for symbol in OPERATIONS
        },
        "factorial_20": calculator.factorial(20),
        "derivative": calculator.calculate_derivative(lambda x: x * x * x + 2 * x, 2.0),
        "integral": calculator.calculate_integral(lambda x: x * x, 0.0, 1.0),
        "equation_root": calculator.solve_equation(lambda x: x * x - 4, initial_guess=1.0),
        "polynomial_roots": [
            [root.real, root.imag]
            for root in calculator.find_polynomial_roots(QUADRATIC_COEFFICIENTS)
        ],
        "matrix_product": matrix_payload,
        "moving_average": list(
            calculator.moving_average([float(n) for n in range(1, 11)], 3)
        ),
        "async_area": asyncio.run(
            calculator.calculate_async(lambda: _circle_area(10.0, async_delay))
        ),
        "statistics": stats_payload,
        "fibonacci": calculator.fibonacci_sequence(FIBONACCI_COUNT),
    }
