"""
JSON Schema Contract Validators

Валидация сырых options конфигурации против JSON Schema контракта до
построения DecimalConfig. Ошибки схемы переводятся в InvalidConfig с именем
поля и отклонённым значением.

Схемы (package data, decimals/core/contracts/schema/):
- config.json: частичный mapping options для config_set / config_derive
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from decimals.core.errors import InvalidConfig


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ConfigOptionsValidator(ContractValidator):
    """Валидатор options конфигурации (config.json)."""

    def __init__(self):
        super().__init__("config")

    def first_error(self, data: Any) -> ValidationError | None:
        """Наиболее релевантная ошибка или None."""
        return best_match(self.iter_errors(data))


_CONFIG_VALIDATOR: ConfigOptionsValidator | None = None


def _config_validator() -> ConfigOptionsValidator:
    global _CONFIG_VALIDATOR
    if _CONFIG_VALIDATOR is None:
        _CONFIG_VALIDATOR = ConfigOptionsValidator()
    return _CONFIG_VALIDATOR


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_config_options(options: Any) -> None:
    """
    Валидация options конфигурации против config.json.

    Args:
        options: Mapping с частичной конфигурацией

    Raises:
        InvalidConfig: Первое нарушение схемы (поле и отклонённое значение)

    Examples:
        >>> validate_config_options({"precision": 10, "rounding": "half-even"})
    """
    if not isinstance(options, Mapping):
        raise InvalidConfig("options", options, "expected a mapping")

    error = _config_validator().first_error(dict(options))
    if error is None:
        return

    if error.absolute_path:
        field = str(error.absolute_path[0])
        value = options.get(field)
    else:
        field, value = "options", options

    raise InvalidConfig(field, value, error.message)
