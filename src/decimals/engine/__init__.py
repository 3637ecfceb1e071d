"""
Engine Module

Configuration registry (Engine) и process-wide default handle.
"""

from .default import (
    DEFAULT_ENGINE,
    config_derive,
    config_set,
    current_config,
    decimal,
    is_decimal,
    pow,
)
from .engine import Engine

__all__ = [
    # Classes
    "Engine",
    # Default handle
    "DEFAULT_ENGINE",
    "config_set",
    "config_derive",
    "current_config",
    "decimal",
    "is_decimal",
    "pow",
]
