"""
Default Engine — process-wide handle и функции уровня пакета

DEFAULT_ENGINE создаётся при импорте с конфигурацией по умолчанию.
config_set заменяет его конфигурацию; config_derive возвращает независимый
Engine и DEFAULT_ENGINE не трогает.
"""

from collections.abc import Mapping
from typing import Any, Final

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.value import Decimal
from decimals.engine.engine import Engine

DEFAULT_ENGINE: Final[Engine] = Engine()


def config_set(options: Mapping[str, Any]) -> None:
    """
    Замена конфигурации default engine.

    Raises:
        InvalidConfig: Конфигурация при этом не меняется
    """
    DEFAULT_ENGINE.config_set(options)


def config_derive(options: Mapping[str, Any] | None = None) -> Engine:
    """Новый независимый Engine на базе конфигурации default engine."""
    return DEFAULT_ENGINE.config_derive(options)


def current_config() -> DecimalConfig:
    """Текущий снапшот конфигурации default engine."""
    return DEFAULT_ENGINE.config


def decimal(value: Any) -> Decimal:
    """
    Decimal, привязанный к default engine.

    Raises:
        InvalidNumber: Если value не numeral text, не int/float и не Decimal
    """
    return DEFAULT_ENGINE.decimal(value)


def is_decimal(value: Any) -> bool:
    return Engine.is_decimal(value)


def pow(value: Any, exponent: Any) -> Decimal:
    """value ** exponent под конфигурацией default engine."""
    return DEFAULT_ENGINE.pow(value, exponent)
