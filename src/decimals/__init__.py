"""
decimals — десятичная арифметика произвольной точности

Значения хранятся точно в base-10; операции округляются до настраиваемой
precision по одному из девяти режимов округления.

Examples:
    >>> from decimals import config_derive, decimal
    >>> str(decimal("0.1") + decimal("0.2"))
    '0.3'
    >>> str(config_derive({"precision": 5}).divide(1, 3))
    '0.33333'
"""

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.modes import ModuloMode, RoundingMode
from decimals.core.domain.number import Kind
from decimals.core.domain.value import Decimal
from decimals.core.errors import DecimalError, DivisionByZero, InvalidConfig, InvalidNumber
from decimals.engine import (
    DEFAULT_ENGINE,
    Engine,
    config_derive,
    config_set,
    current_config,
    decimal,
    is_decimal,
    pow,
)

__version__ = "0.1.0"

__all__ = [
    # Values and configuration
    "Decimal",
    "DecimalConfig",
    "Kind",
    "RoundingMode",
    "ModuloMode",
    # Errors
    "DecimalError",
    "InvalidConfig",
    "InvalidNumber",
    "DivisionByZero",
    # Engine
    "Engine",
    "DEFAULT_ENGINE",
    "config_set",
    "config_derive",
    "current_config",
    "decimal",
    "is_decimal",
    "pow",
]
