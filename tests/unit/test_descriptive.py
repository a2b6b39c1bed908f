"""
Тесты для Descriptive Statistics

Проверяет:
1. mean / median / standard_deviation
2. Поправку Бесселя (делитель n - 1)
3. Независимость от порядка элементов
4. Скользящее среднее
5. describe → DescriptiveStatistics
6. Ошибки на пустых и слишком коротких выборках
"""

import math
import random

import pytest

from advcalc.core.domain import DescriptiveStatistics
from advcalc.core.math.descriptive import (
    describe,
    mean,
    median,
    moving_average,
    standard_deviation,
)

SAMPLE = [1.2, 2.3, 3.4, 4.5, 5.6, 6.7, 7.8, 8.9, 9.0, 10.1]


class TestMean:
    """Тесты mean."""

    def test_simple(self):
        assert mean([1, 2, 3, 4]) == 2.5

    def test_accepts_generator(self):
        assert mean(x for x in (2.0, 4.0)) == 3.0

    def test_empty(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            mean([])


class TestMedian:
    """Тесты median."""

    def test_even_count(self):
        """Чётный размер → среднее двух средних элементов."""
        assert median([1, 2, 3, 4]) == 2.5

    def test_odd_count(self):
        """Нечётный размер → средний элемент."""
        assert median([1, 2, 3]) == 2

    def test_unsorted_input(self):
        """Вход сортируется по возрастанию."""
        assert median([9, 1, 5, 3, 7]) == 5
        assert median([4, 1, 3, 2]) == 2.5

    def test_single_value(self):
        assert median([42.0]) == 42.0

    def test_empty(self):
        with pytest.raises(ValueError, match="Collection cannot be empty"):
            median([])


class TestStandardDeviation:
    """Тесты standard_deviation (sample, делитель n - 1)."""

    def test_known_value(self):
        """[2,4,4,4,5,5,7,9]: Σ(x-5)² = 32, sqrt(32/7)."""
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(math.sqrt(32 / 7))

    def test_bessel_correction(self):
        """[1, 3]: sqrt(2/1), а не sqrt(2/2)."""
        assert standard_deviation([1, 3]) == pytest.approx(math.sqrt(2.0))

    def test_constant_sample(self):
        assert standard_deviation([3.0, 3.0, 3.0]) == 0.0

    def test_reordering_invariance(self):
        """Перестановка элементов не меняет результат."""
        shuffled = list(SAMPLE)
        random.Random(7).shuffle(shuffled)
        assert standard_deviation(shuffled) == pytest.approx(standard_deviation(SAMPLE))
        assert standard_deviation(list(reversed(SAMPLE))) == pytest.approx(
            standard_deviation(SAMPLE)
        )

    @pytest.mark.parametrize("values", [[], [1.0]])
    def test_requires_two_values(self, values):
        with pytest.raises(ValueError, match="At least two values"):
            standard_deviation(values)


class TestMovingAverage:
    """Тесты moving_average."""

    def test_window_of_three(self):
        values = [float(n) for n in range(1, 11)]
        assert list(moving_average(values, 3)) == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]

    def test_window_of_one(self):
        assert list(moving_average([4, 5, 6], 1)) == [4.0, 5.0, 6.0]

    def test_window_larger_than_data(self):
        """Нет ни одного полного окна → пусто."""
        assert list(moving_average([1, 2], 3)) == []

    def test_lazy_evaluation(self):
        """Генератор выдаёт значения по мере поступления данных."""

        def source():
            yield 1.0
            yield 3.0
            raise AssertionError("consumed too far")

        averages = moving_average(source(), 2)
        assert next(averages) == 2.0

    @pytest.mark.parametrize("window_size", [0, -3])
    def test_invalid_window(self, window_size):
        """window_size <= 0 → ValueError сразу при вызове."""
        with pytest.raises(ValueError, match="window_size must be positive"):
            moving_average([1, 2, 3], window_size)


class TestDescribe:
    """Тесты describe."""

    def test_sample(self):
        stats = describe(SAMPLE)

        assert isinstance(stats, DescriptiveStatistics)
        assert stats.mean == pytest.approx(5.95)
        assert stats.median == pytest.approx(6.15)
        assert stats.standard_deviation == pytest.approx(standard_deviation(SAMPLE))
        assert stats.min == 1.2
        assert stats.max == 10.1
        assert stats.count == 10

    def test_accepts_iterator(self):
        stats = describe(iter([1.0, 2.0, 3.0]))
        assert stats.count == 3
        assert stats.median == 2.0

    def test_empty(self):
        with pytest.raises(ValueError, match="Data cannot be empty"):
            describe([])

    def test_single_value_fails_on_standard_deviation(self):
        """Одно значение: стандартное отклонение не определено."""
        with pytest.raises(ValueError, match="At least two values"):
            describe([5.0])
