"""
Contract Validation Module

JSON Schema контракты advcalc (matrix, descriptive_statistics).
"""

from .validators import (
    CONTRACTS,
    DESCRIPTIVE_STATISTICS_CONTRACT,
    MATRIX_CONTRACT,
    SCHEMA_DIR,
    contract_validator,
    read_schema,
    validate_contract,
    validate_descriptive_statistics,
    validate_matrix,
)

__all__ = [
    # Contracts
    "CONTRACTS",
    "MATRIX_CONTRACT",
    "DESCRIPTIVE_STATISTICS_CONTRACT",
    "SCHEMA_DIR",
    # Functions
    "read_schema",
    "contract_validator",
    "validate_contract",
    "validate_matrix",
    "validate_descriptive_statistics",
]
