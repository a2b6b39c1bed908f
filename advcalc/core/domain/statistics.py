"""
DescriptiveStatistics — Модель описательных статистик выборки

Immutable Pydantic модель: шесть агрегатов, вычисляемых один раз из выборки.
Полная совместимость с JSON Schema (contracts/schema/descriptive_statistics.json).
"""

from pydantic import BaseModel, Field, field_validator


class DescriptiveStatistics(BaseModel):
    """
    Описательные статистики выборки.

    Immutable модель (frozen=True): после вычисления значения не изменяются.
    """

    mean: float = Field(..., description="Среднее арифметическое")
    median: float = Field(..., description="Медиана")
    standard_deviation: float = Field(
        ..., ge=0, description="Выборочное стандартное отклонение (делитель n - 1)"
    )
    min: float = Field(..., description="Минимальное значение")
    max: float = Field(..., description="Максимальное значение")
    count: int = Field(..., ge=1, description="Размер выборки")

    model_config = {"frozen": True}

    @field_validator("max")
    @classmethod
    def validate_max_not_below_min(cls, v: float, info) -> float:
        """Проверка, что max >= min"""
        if "min" in info.data:
            min_value = info.data["min"]
            if v < min_value:
                raise ValueError(f"max {v} must be >= min {min_value}")
        return v

    def format_lines(self, decimals: int = 4) -> list[str]:
        """
        Строки для консольного вывода.

        Args:
            decimals: Число знаков после запятой для float полей

        Returns:
            ["Mean: ...", "Median: ...", ..., "Count: N"]
        """
        return [
            f"Mean: {self.mean:.{decimals}f}",
            f"Median: {self.median:.{decimals}f}",
            f"Standard Deviation: {self.standard_deviation:.{decimals}f}",
            f"Min: {self.min:.{decimals}f}",
            f"Max: {self.max:.{decimals}f}",
            f"Count: {self.count}",
        ]
