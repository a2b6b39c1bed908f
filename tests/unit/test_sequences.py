"""
Тесты для Sequences — factorial, Fibonacci, генерация и преобразование данных
"""

import pytest

from advcalc.core.math.sequences import (
    factorial,
    fibonacci_sequence,
    generate_sequence,
    transform_data,
)


class TestFactorial:
    """Тесты factorial."""

    def test_zero(self):
        assert factorial(0) == 1

    def test_small_values(self):
        assert [factorial(n) for n in range(6)] == [1, 1, 2, 6, 24, 120]

    def test_twenty(self):
        assert factorial(20) == 2432902008176640000

    def test_arbitrary_precision(self):
        """25! выходит за пределы int64."""
        assert factorial(25) == 15511210043330985984000000

    def test_large_input_without_recursion_limit(self):
        """Итеративная реализация не упирается в глубину рекурсии."""
        result = factorial(5000)
        assert result % 10 ** 100 == 0
        assert result == 5000 * factorial(4999)

    @pytest.mark.parametrize("n", [-1, -20])
    def test_negative_rejected(self, n):
        with pytest.raises(ValueError, match="not defined for negative numbers"):
            factorial(n)


class TestFibonacciSequence:
    """Тесты fibonacci_sequence."""

    def test_first_fifteen(self):
        assert fibonacci_sequence(15) == [
            0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377
        ]

    def test_single(self):
        assert fibonacci_sequence(1) == [0]

    def test_arbitrary_precision(self):
        """F_100 = 354224848179261915075."""
        assert fibonacci_sequence(101)[-1] == 354224848179261915075

    def test_recurrence(self):
        seq = fibonacci_sequence(50)
        assert all(seq[i] == seq[i - 1] + seq[i - 2] for i in range(2, 50))

    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_count_rejected(self, count):
        with pytest.raises(ValueError, match="count must be positive"):
            fibonacci_sequence(count)


class TestGenerateSequence:
    """Тесты generate_sequence."""

    def test_filtered_squares(self):
        """Квадраты 1..10, только чётные."""
        assert generate_sequence(1.0, lambda x: x * x, 10, lambda x: x % 2 == 0) == [
            4.0, 16.0, 36.0, 64.0, 100.0
        ]

    def test_without_predicate(self):
        assert generate_sequence(0.5, lambda x: 2 * x, 3) == [1.0, 3.0, 5.0]

    def test_zero_count(self):
        assert generate_sequence(1.0, lambda x: x, 0) == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="count must be non-negative"):
            generate_sequence(1.0, lambda x: x, -1)


class TestTransformData:
    """Тесты transform_data."""

    def test_transform(self):
        assert transform_data(5.0, lambda x: x * x + 2 * x + 1) == 36.0

    def test_validator_accepts(self):
        assert transform_data("abc", str.upper, lambda s: len(s) == 3) == "ABC"

    def test_validator_rejects(self):
        with pytest.raises(ValueError, match="Input validation failed"):
            transform_data(-1.0, lambda x: x ** 0.5, lambda x: x >= 0)

    def test_transformer_not_called_on_rejection(self):
        calls = []
        with pytest.raises(ValueError):
            transform_data(1, calls.append, lambda x: False)
        assert calls == []
