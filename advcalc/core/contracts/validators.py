"""
Contracts — JSON Schema контракты payload'ов advcalc

Каждый контракт — файл schema/<name>.json (Draft 2020-12), поставляемый с пакетом.
Схема читается и проходит meta-validation при первом обращении к контракту,
скомпилированный validator кэшируется на всё время жизни процесса.

Контракты:
- "matrix":                 Matrix.to_payload() / Matrix.from_payload()
- "descriptive_statistics": DescriptiveStatistics.model_dump()

При нарушении поднимается одна ValidationError — наиболее релевантная
(jsonschema.exceptions.best_match), её message попадает в вывод CLI.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.exceptions import best_match

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

MATRIX_CONTRACT: Final[str] = "matrix"
DESCRIPTIVE_STATISTICS_CONTRACT: Final[str] = "descriptive_statistics"

CONTRACTS: Final[tuple[str, ...]] = (MATRIX_CONTRACT, DESCRIPTIVE_STATISTICS_CONTRACT)


# =============================================================================
# SCHEMA FILES
# =============================================================================


def read_schema(path: Path) -> dict[str, Any]:
    """
    Чтение файла схемы с meta-validation.

    Args:
        path: Путь к .json файлу схемы

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: файл не существует
        ValueError: файл не является валидной Draft 2020-12 схемой
    """
    schema = json.loads(path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def contract_validator(name: str) -> Draft202012Validator:
    """
    Скомпилированный validator контракта (один экземпляр на процесс).

    Raises:
        ValueError: неизвестный контракт или невалидная схема
    """
    if name not in CONTRACTS:
        raise ValueError(f"Unknown contract '{name}' (known: {', '.join(CONTRACTS)})")
    return Draft202012Validator(read_schema(SCHEMA_DIR / f"{name}.json"))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_contract(name: str, payload: Any) -> None:
    """
    Проверка payload против контракта name.

    Raises:
        jsonschema.ValidationError: наиболее релевантное нарушение контракта
        ValueError: неизвестный контракт
    """
    error = best_match(contract_validator(name).iter_errors(payload))
    if error is not None:
        raise error


def validate_matrix(payload: Any) -> None:
    validate_contract(MATRIX_CONTRACT, payload)


def validate_descriptive_statistics(payload: Any) -> None:
    validate_contract(DESCRIPTIVE_STATISTICS_CONTRACT, payload)
