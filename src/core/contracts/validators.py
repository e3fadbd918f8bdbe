"""
JSON Schema Contract Validators

Модуль для валидации входных JSON документов согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (contracts/schema/ в корне проекта):
- reconstruction_input.json (документ: массив cases или один case)
- reconstruction_case.json (один case: keys.{n, k} + shares)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

# Корень проекта — 4 уровня вверх от этого файла
SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (с кэшированием).

    Args:
        schema_name: Имя схемы без расширения (например, 'reconstruction_case')

    Returns:
        Загруженная схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def violations(self, data: Any) -> List[str]:
        """
        Все нарушения схемы в виде "<путь>: <сообщение>", упорядоченные по пути.

        Пустой список — данные валидны.
        """
        errors = sorted(
            self.validator.iter_errors(data),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        result = []
        for error in errors:
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            result.append(f"{location}: {error.message}")
        return result


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Один экземпляр валидатора на схему."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_reconstruction_input(data: Any) -> None:
    """
    Валидация входного документа.

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    get_validator("reconstruction_input").validate(data)


def reconstruction_case_violations(data: Any) -> List[str]:
    """Нарушения контракта одного case (пустой список — case валиден)."""
    return get_validator("reconstruction_case").violations(data)
