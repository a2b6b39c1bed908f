"""
advcalc — numeric routines with a console demonstration.

Arithmetic operations, numerical derivative/integral, Newton-Raphson,
polynomial roots, dense matrices, descriptive statistics and integer
sequences.
"""

from advcalc.calculator import AdvancedCalculator, CalculusConfig, DisplayConfig
from advcalc.core.domain import DescriptiveStatistics
from advcalc.core.errors import (
    CalculationError,
    ConvergenceError,
    DegenerateDerivativeError,
    DimensionMismatchError,
)
from advcalc.core.math import Matrix

__version__ = "0.1.0"

__all__ = [
    "AdvancedCalculator",
    "CalculusConfig",
    "DisplayConfig",
    "DescriptiveStatistics",
    "Matrix",
    "CalculationError",
    "ConvergenceError",
    "DegenerateDerivativeError",
    "DimensionMismatchError",
    "__version__",
]
