"""
Calculation Errors — иерархия исключений вычислительного ядра

Условия ошибок:
- invalid argument (пустой/отрицательный/неизвестный ввод) → ValueError
- деление на ноль → ZeroDivisionError
- несовпадение размерностей матриц → DimensionMismatchError
- вырожденная производная в Newton-Raphson → DegenerateDerivativeError
- отсутствие сходимости за max_iterations → ConvergenceError

Все ошибки синхронные и пробрасываются вызывающему коду без повторов.
"""


class CalculationError(Exception):
    """Базовое исключение для ошибок вычислительного ядра."""
    pass


class DimensionMismatchError(CalculationError):
    """Размерности матриц несовместимы для операции."""
    pass


class DegenerateDerivativeError(CalculationError):
    """
    |f'(x)| < tolerance на шаге Newton-Raphson.

    Шаг x - f(x)/f'(x) не определён, итерация прерывается.
    """
    pass


class ConvergenceError(CalculationError):
    """Итерационный метод не сошёлся за отведённое число итераций."""
    pass
