"""
Core math modules для advcalc

Численные алгоритмы: арифметика, производная, интеграл, Newton-Raphson,
корни полиномов, матрицы, описательные статистики, последовательности.
"""

# Numerical Safeguards
from advcalc.core.math.numerical_safeguards import (
    EPS_DIVISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_below_epsilon,
    is_close,
    is_valid_float,
    validate_finite,
    validate_non_negative_int,
    validate_positive,
    validate_positive_int,
)

# Operations
from advcalc.core.math.operations import (
    OPERATIONS,
    AdditionOperation,
    CalculatorOperation,
    DivisionOperation,
    LogarithmOperation,
    MultiplicationOperation,
    PowerOperation,
    SubtractionOperation,
    execute_operation,
    get_operation,
)

# Calculus
from advcalc.core.math.calculus import (
    DERIVATIVE_STEP,
    INTEGRAL_STEPS_DEFAULT,
    SOLVER_MAX_ITERATIONS_DEFAULT,
    SOLVER_TOLERANCE_DEFAULT,
    derivative,
    integral,
    solve_equation,
)

# Polynomials
from advcalc.core.math.polynomials import (
    evaluate_polynomial,
    find_polynomial_roots,
    quadratic_roots,
)

# Matrix
from advcalc.core.math.matrix import Matrix, multiply_matrices

# Descriptive statistics
from advcalc.core.math.descriptive import (
    describe,
    mean,
    median,
    moving_average,
    standard_deviation,
)

# Sequences
from advcalc.core.math.sequences import (
    factorial,
    fibonacci_sequence,
    generate_sequence,
    transform_data,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_DIVISION",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checks
    "is_below_epsilon",
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_non_negative_int",
    "validate_positive",
    "validate_positive_int",
    # Operations
    "OPERATIONS",
    "CalculatorOperation",
    "AdditionOperation",
    "SubtractionOperation",
    "MultiplicationOperation",
    "DivisionOperation",
    "PowerOperation",
    "LogarithmOperation",
    "execute_operation",
    "get_operation",
    # Calculus — Constants
    "DERIVATIVE_STEP",
    "INTEGRAL_STEPS_DEFAULT",
    "SOLVER_MAX_ITERATIONS_DEFAULT",
    "SOLVER_TOLERANCE_DEFAULT",
    # Calculus — Functions
    "derivative",
    "integral",
    "solve_equation",
    # Polynomials
    "evaluate_polynomial",
    "find_polynomial_roots",
    "quadratic_roots",
    # Matrix
    "Matrix",
    "multiply_matrices",
    # Descriptive statistics
    "describe",
    "mean",
    "median",
    "moving_average",
    "standard_deviation",
    # Sequences
    "factorial",
    "fibonacci_sequence",
    "generate_sequence",
    "transform_data",
]
