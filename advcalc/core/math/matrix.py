"""
Matrix — плотная матрица float фиксированной формы

Инварианты:
1. Форма (rows × columns) фиксируется при создании и не меняется
2. Элементы изменяемы на месте: matrix[i, j] = value
3. Данные копируются при создании из списков (без aliasing)
4. Операции, требующие совместимых размерностей, проверяют их ДО вычислений
   (DimensionMismatchError)

Payload-форма (JSON контракт "matrix"):
    {"rows": 2, "columns": 2, "data": [[1.0, 2.0], [3.0, 4.0]]}
"""

from collections.abc import Sequence
from typing import Any

from advcalc.core.contracts import validate_matrix
from advcalc.core.errors import DimensionMismatchError
from advcalc.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    validate_non_negative_int,
)


class Matrix:
    """
    Плотная матрица float.

    Создание:
        Matrix(rows, columns)      — нулевая матрица
        Matrix.from_rows(data)     — копия двумерных данных
        Matrix.from_payload(data)  — из JSON payload (с валидацией контракта)
    """

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int):
        """
        Args:
            rows: Число строк (>= 0)
            columns: Число столбцов (>= 0)

        Raises:
            ValueError: если rows или columns отрицательные
        """
        validate_non_negative_int(rows, "rows")
        validate_non_negative_int(columns, "columns")

        self._rows = rows
        self._columns = columns
        self._data = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из двумерных данных (данные копируются).

        Raises:
            ValueError: если строки разной длины
        """
        rows = len(data)
        columns = len(data[0]) if rows else 0

        for i, row in enumerate(data):
            if len(row) != columns:
                raise ValueError(
                    f"Ragged matrix data: row {i} has {len(row)} columns, expected {columns}"
                )

        matrix = cls(rows, columns)
        matrix._data = [[float(value) for value in row] for row in data]
        return matrix

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Matrix":
        """
        Матрица из JSON payload.

        Raises:
            jsonschema.ValidationError: payload не соответствует контракту "matrix"
            ValueError: rows/columns не совпадают с формой data
        """
        validate_matrix(payload)

        data = payload["data"]
        # без строк ширина берётся из заявленного columns
        matrix = cls.from_rows(data) if data else cls(0, payload["columns"])
        if matrix.shape != (payload["rows"], payload["columns"]):
            raise ValueError(
                f"Declared shape {payload['rows']}x{payload['columns']} "
                f"does not match data shape {matrix.rows}x{matrix.columns}"
            )
        return matrix

    # -------------------------------------------------------------------------
    # Shape & element access
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(
                f"Index ({row}, {col}) out of range for {self._rows}x{self._columns} matrix"
            )

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        self._check_index(row, col)
        return self._data[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._check_index(row, col)
        self._data[row][col] = float(value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _validate_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Matrix dimensions must match: {self._rows}x{self._columns} "
                f"vs {other.rows}x{other.columns}"
            )

    def add(self, other: "Matrix") -> "Matrix":
        """Поэлементная сумма (формы должны совпадать)."""
        self._validate_same_shape(other)
        result = Matrix(self._rows, self._columns)

        for i in range(self._rows):
            for j in range(self._columns):
                result._data[i][j] = self._data[i][j] + other._data[i][j]

        return result

    def subtract(self, other: "Matrix") -> "Matrix":
        """Поэлементная разность (формы должны совпадать)."""
        self._validate_same_shape(other)
        result = Matrix(self._rows, self._columns)

        for i in range(self._rows):
            for j in range(self._columns):
                result._data[i][j] = self._data[i][j] - other._data[i][j]

        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """Матричное произведение self · other."""
        return multiply_matrices(self, other)

    def __add__(self, other: "Matrix") -> "Matrix":
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return self.subtract(other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return multiply_matrices(self, other)

    # -------------------------------------------------------------------------
    # Comparison & export
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def allclose(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементное сравнение с учётом машинной точности."""
        if self.shape != other.shape:
            return False
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def to_rows(self) -> list[list[float]]:
        """Копия данных в виде списка строк."""
        return [list(row) for row in self._data]

    def to_payload(self) -> dict[str, Any]:
        """JSON payload, соответствующий контракту "matrix"."""
        return {"rows": self._rows, "columns": self._columns, "data": self.to_rows()}

    def format(self, decimals: int = 2) -> str:
        """Табличное представление: ячейки через TAB, строки через перевод строки."""
        return "\n".join(
            "\t".join(f"{value:.{decimals}f}" for value in row) for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, data={self._data!r})"


def multiply_matrices(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение a · b (классический тройной цикл).

    Args:
        a: Матрица m × n
        b: Матрица n × p

    Returns:
        Матрица m × p

    Raises:
        DimensionMismatchError: если a.columns != b.rows

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> b = Matrix.from_rows([[5, 6], [7, 8]])
        >>> multiply_matrices(a, b).to_rows()
        [[19.0, 22.0], [43.0, 50.0]]
    """
    if a.columns != b.rows:
        raise DimensionMismatchError(
            f"Matrix dimensions are incompatible for multiplication: "
            f"{a.rows}x{a.columns} · {b.rows}x{b.columns}"
        )

    result = Matrix(a.rows, b.columns)

    for i in range(a.rows):
        for j in range(b.columns):
            total = 0.0
            for k in range(a.columns):
                total += a[i, k] * b[k, j]
            result[i, j] = total

    return result
