"""
Contract Validation Module

JSON Schema контракты входных данных decimal engine.
"""

from .validators import (
    ConfigOptionsValidator,
    ContractValidator,
    SchemaLoader,
    validate_config_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConfigOptionsValidator",
    # Functions
    "validate_config_options",
]
