"""
Contract Validation Module

Модуль для валидации входных JSON контрактов.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    get_validator,
    load_schema,
    reconstruction_case_violations,
    validate_reconstruction_input,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "ContractValidator",
    # Functions
    "get_validator",
    "load_schema",
    "reconstruction_case_violations",
    "validate_reconstruction_input",
]
