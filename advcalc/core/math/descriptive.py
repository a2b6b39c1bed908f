"""
Descriptive Statistics — описательные статистики конечной выборки

ФОРМУЛЫ:
    mean   = Σ x_i / n
    median = x_(n/2)                               (n нечётное, по сортировке)
           = (x_(n/2 - 1) + x_(n/2)) / 2           (n чётное)
    std    = sqrt(Σ (x_i - mean)² / (n - 1))       (sample, поправка Бесселя)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка → ValueError
2. Стандартное отклонение требует >= 2 значений
3. Результаты не зависят от порядка элементов выборки
"""

import math
from collections import deque
from collections.abc import Iterable, Iterator

from advcalc.core.domain.statistics import DescriptiveStatistics
from advcalc.core.math.numerical_safeguards import validate_positive_int


def _as_list(values: Iterable[float]) -> list[float]:
    return [float(v) for v in values]


def mean(values: Iterable[float]) -> float:
    """
    Среднее арифметическое.

    Raises:
        ValueError: если выборка пустая
    """
    data = _as_list(values)
    if not data:
        raise ValueError("Collection cannot be empty")
    return sum(data) / len(data)


def median(values: Iterable[float]) -> float:
    """
    Медиана: средний элемент отсортированной выборки
    (среднее двух средних для чётного размера).

    Raises:
        ValueError: если выборка пустая

    Examples:
        >>> median([1, 2, 3, 4])
        2.5
        >>> median([3, 1, 2])
        2.0
    """
    data = sorted(_as_list(values))
    count = len(data)

    if count == 0:
        raise ValueError("Collection cannot be empty")

    middle = count // 2
    if count % 2 == 0:
        return (data[middle - 1] + data[middle]) / 2.0
    return data[middle]


def standard_deviation(values: Iterable[float]) -> float:
    """
    Выборочное стандартное отклонение (делитель n - 1).

    Raises:
        ValueError: если значений меньше двух

    Examples:
        >>> standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
        2.138089935299395
    """
    data = _as_list(values)
    if len(data) < 2:
        raise ValueError("At least two values are required for standard deviation")

    avg = sum(data) / len(data)
    sum_squares = sum((x - avg) ** 2 for x in data)
    return math.sqrt(sum_squares / (len(data) - 1))


def moving_average(values: Iterable[float], window_size: int) -> Iterator[float]:
    """
    Скользящее среднее по полным окнам размера window_size.

    Генератор: значения выдаются по мере заполнения окна.

    Raises:
        ValueError: если window_size <= 0 (при создании генератора)

    Examples:
        >>> list(moving_average([1, 2, 3, 4, 5], 3))
        [2.0, 3.0, 4.0]
    """
    validate_positive_int(window_size, "window_size")
    return _moving_average(values, window_size)


def _moving_average(values: Iterable[float], window_size: int) -> Iterator[float]:
    window: deque[float] = deque(maxlen=window_size)

    for value in values:
        window.append(float(value))
        if len(window) == window_size:
            yield sum(window) / window_size


def describe(values: Iterable[float]) -> DescriptiveStatistics:
    """
    Описательные статистики выборки.

    Стандартное отклонение входит в результат, поэтому выборка
    должна содержать минимум два значения.

    Raises:
        ValueError: если выборка пустая или содержит одно значение
    """
    data = _as_list(values)
    if not data:
        raise ValueError("Data cannot be empty")

    return DescriptiveStatistics(
        mean=mean(data),
        median=median(data),
        standard_deviation=standard_deviation(data),
        min=min(data),
        max=max(data),
        count=len(data),
    )
