"""
JSON Schema контракты результатов раскладов (Draft 2020-12).

Схемы лежат в src/core/contracts/schema/ (package data):
- daily_card_result.json
- reading_snapshot.json

CardCalculationService проверяет свои результаты через validate_contract(),
если в ServiceConfig включён validate_contracts.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Optional

import jsonschema
from jsonschema import Draft202012Validator

DAILY_CARD_RESULT: Final[str] = "daily_card_result"
READING_SNAPSHOT: Final[str] = "reading_snapshot"

DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


class SchemaLoader:
    """Загрузка и кэш схем из каталога; каждая схема проходит meta-validation."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.validator = Draft202012Validator((loader or _LOADER).load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


_LOADER = SchemaLoader()
_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """Валидатор для схемы из пакета (создаётся один раз)."""
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        validator = _VALIDATORS.setdefault(schema_name, ContractValidator(schema_name))
    return validator


def validate_contract(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Данные не соответствуют схеме
    """
    get_validator(schema_name).validate(data)
