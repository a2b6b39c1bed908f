"""
Operations — бинарные арифметические операции

Единый интерфейс CalculatorOperation для операций над двумя float:
- "+"   Addition
- "-"   Subtraction
- "*"   Multiplication
- "/"   Division (ZeroDivisionError при abs(b) < EPS_DIVISION)
- "^"   Power (±inf при переполнении)
- "log" Logarithm (log_b(a), ValueError при a <= 0, b <= 0 или b == 1)

Реестр OPERATIONS сопоставляет символ операции с её реализацией.
"""

import math
from abc import ABC, abstractmethod
from typing import Final

from advcalc.core.math.numerical_safeguards import EPS_DIVISION, is_below_epsilon


# =============================================================================
# INTERFACE
# =============================================================================


class CalculatorOperation(ABC):
    """
    Бинарная операция калькулятора.

    Attributes:
        symbol: Символ операции в реестре (например, "+")
        name: Человекочитаемое имя (например, "Addition")
    """

    symbol: str = ""
    name: str = ""

    @abstractmethod
    def execute(self, a: float, b: float) -> float:
        """Выполнение операции над a и b."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(symbol={self.symbol!r})"


# =============================================================================
# OPERATIONS
# =============================================================================


class AdditionOperation(CalculatorOperation):
    symbol = "+"
    name = "Addition"

    def execute(self, a: float, b: float) -> float:
        return a + b


class SubtractionOperation(CalculatorOperation):
    symbol = "-"
    name = "Subtraction"

    def execute(self, a: float, b: float) -> float:
        return a - b


class MultiplicationOperation(CalculatorOperation):
    symbol = "*"
    name = "Multiplication"

    def execute(self, a: float, b: float) -> float:
        return a * b


class DivisionOperation(CalculatorOperation):
    symbol = "/"
    name = "Division"

    def execute(self, a: float, b: float) -> float:
        """
        Деление a / b.

        Raises:
            ZeroDivisionError: если abs(b) < EPS_DIVISION
        """
        if is_below_epsilon(b, EPS_DIVISION):
            raise ZeroDivisionError("Cannot divide by zero")
        return a / b


class PowerOperation(CalculatorOperation):
    symbol = "^"
    name = "Power"

    def execute(self, a: float, b: float) -> float:
        """
        Возведение a в степень b.

        Raises:
            ValueError: отрицательное основание с дробной степенью

        Examples:
            >>> PowerOperation().execute(10.0, 1000.0)
            inf
            >>> PowerOperation().execute(-10.0, 1001.0)
            -inf
        """
        try:
            return math.pow(a, b)
        except OverflowError:
            # знак минус только у отрицательного основания в нечётной степени
            negative = a < 0 and float(b).is_integer() and int(b) % 2 == 1
            return -math.inf if negative else math.inf


class LogarithmOperation(CalculatorOperation):
    symbol = "log"
    name = "Logarithm"

    def execute(self, a: float, b: float) -> float:
        """
        Логарифм a по основанию b.

        Raises:
            ValueError: если a <= 0, b <= 0 или abs(b - 1) < EPS_DIVISION
        """
        if a <= 0 or b <= 0 or is_below_epsilon(b - 1.0, EPS_DIVISION):
            raise ValueError(f"Invalid arguments for logarithm: a={a}, base={b}")
        return math.log(a, b)


# =============================================================================
# REGISTRY
# =============================================================================


OPERATIONS: Final[dict[str, CalculatorOperation]] = {
    op.symbol: op
    for op in (
        AdditionOperation(),
        SubtractionOperation(),
        MultiplicationOperation(),
        DivisionOperation(),
        PowerOperation(),
        LogarithmOperation(),
    )
}


def get_operation(symbol: str) -> CalculatorOperation:
    """
    Поиск операции по символу.

    Raises:
        ValueError: если символ не зарегистрирован
    """
    try:
        return OPERATIONS[symbol]
    except KeyError:
        known = ", ".join(OPERATIONS)
        raise ValueError(f"Unknown operation {symbol!r} (known: {known})") from None


def execute_operation(symbol: str, a: float, b: float) -> float:
    """
    Выполнение операции из реестра.

    Examples:
        >>> execute_operation("+", 2.0, 3.0)
        5.0
        >>> execute_operation("log", 8.0, 2.0)
        3.0
    """
    return get_operation(symbol).execute(a, b)
