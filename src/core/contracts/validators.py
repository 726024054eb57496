"""
Config Contract Validators

Проверка сырых конфигураций числового поля по JSON Schema до построения
Pydantic моделей. Схемы лежат в schema/ рядом с модулем и поставляются
как package data:
- input_number_config.json — границы, шаг, число знаков, флаги поля

Невалидная схема — ошибка сборки пакета (ValueError при загрузке),
невалидные данные — jsonschema.ValidationError у вызывающей стороны.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"

INPUT_NUMBER_CONFIG = "input_number_config"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем контрактов с кэшированием.

    Каждая схема проходит meta-validation (Draft 2020-12) один раз, при
    первой загрузке.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени.

        Raises:
            FileNotFoundError: Файла схемы нет в каталоге
            ValueError: Схема не проходит meta-validation
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных по одной схеме контракта."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def describe_errors(self, data: Mapping[str, Any]) -> List[str]:
        """
        Все нарушения в виде "поле: сообщение", упорядоченные по пути.

        Examples:
            >>> InputNumberConfigValidator().describe_errors({"step": 0})
            ['step: 0 is not valid under any of the given schemas']
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(e.absolute_path))
        return [f"{e.json_path.removeprefix('$.') or '$'}: {e.message}" for e in errors]


class InputNumberConfigValidator(ContractValidator):
    """Контракт конфигурации числового поля."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(INPUT_NUMBER_CONFIG, loader)


_INPUT_NUMBER_CONFIG_VALIDATOR: Optional[InputNumberConfigValidator] = None


def validate_input_number_config(data: Mapping[str, Any]) -> None:
    """
    Проверка конфигурации числового поля общим экземпляром валидатора.

    Raises:
        ValidationError: Конфигурация не соответствует контракту
    """
    global _INPUT_NUMBER_CONFIG_VALIDATOR
    if _INPUT_NUMBER_CONFIG_VALIDATOR is None:
        _INPUT_NUMBER_CONFIG_VALIDATOR = InputNumberConfigValidator()
    _INPUT_NUMBER_CONFIG_VALIDATOR.validate(data)
