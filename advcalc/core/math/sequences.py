"""
Sequences — целочисленные последовательности и преобразования данных

- factorial(n): n! произвольной точности (итеративно, без ограничения глубины рекурсии)
- fibonacci_sequence(count): первые count чисел Фибоначчи (F_0 = 0, F_1 = 1)
- generate_sequence: generator(start + i) для i = 0..count-1 с фильтром
- transform_data: преобразование значения с предварительной валидацией
"""

from collections.abc import Callable, Iterator
from typing import TypeVar

from advcalc.core.math.numerical_safeguards import (
    validate_non_negative_int,
    validate_positive_int,
)

TInput = TypeVar("TInput")
TResult = TypeVar("TResult")


def factorial(n: int) -> int:
    """
    Факториал n! (int произвольной точности).

    Raises:
        ValueError: если n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(20)
        2432902008176640000
    """
    if n < 0:
        raise ValueError(f"Factorial is not defined for negative numbers, got {n}")

    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def _fibonacci_numbers(count: int) -> Iterator[int]:
    a, b = 0, 1
    for _ in range(count):
        yield a
        a, b = b, a + b


def fibonacci_sequence(count: int) -> list[int]:
    """
    Первые count чисел Фибоначчи.

    Raises:
        ValueError: если count <= 0

    Examples:
        >>> fibonacci_sequence(7)
        [0, 1, 1, 2, 3, 5, 8]
    """
    validate_positive_int(count, "count")
    return list(_fibonacci_numbers(count))


def generate_sequence(
    start: float,
    generator: Callable[[float], float],
    count: int,
    predicate: Callable[[float], bool] | None = None,
) -> list[float]:
    """
    Последовательность generator(start + i), i = 0..count-1.

    Args:
        start: Начальный аргумент
        generator: Функция, применяемая к каждому аргументу
        count: Число аргументов
        predicate: Фильтр значений (None — без фильтрации)

    Raises:
        ValueError: если count < 0

    Examples:
        >>> generate_sequence(1, lambda x: x * x, 10, lambda x: x % 2 == 0)
        [4, 16, 36, 64, 100]
    """
    validate_non_negative_int(count, "count")

    values = (generator(start + i) for i in range(count))
    return [v for v in values if predicate is None or predicate(v)]


def transform_data(
    value: TInput,
    transformer: Callable[[TInput], TResult],
    validator: Callable[[TInput], bool] | None = None,
) -> TResult:
    """
    Преобразование value с опциональной валидацией входа.

    Raises:
        ValueError: если validator отклонил value

    Examples:
        >>> transform_data(5.0, lambda x: x * x + 2 * x + 1)
        36.0
    """
    if validator is not None and not validator(value):
        raise ValueError("Input validation failed")
    return transformer(value)
