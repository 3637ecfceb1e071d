"""
Domain models and value objects.

Contains the configuration record, mode enumerations, the internal Number
representation and the engine-bound Decimal value.
"""

from decimals.core.domain.config import (
    DEFAULT_EXP_NOTATION_NEG,
    DEFAULT_EXP_NOTATION_POS,
    DEFAULT_PRECISION,
    EXP_LIMIT,
    MAX_PRECISION,
    DecimalConfig,
)
from decimals.core.domain.modes import MODE_CODES, ModuloMode, RoundingMode
from decimals.core.domain.number import (
    NAN,
    ONE,
    ZERO,
    Kind,
    Number,
    from_coefficient,
    from_digits,
    infinity,
    zero,
)
from decimals.core.domain.value import Decimal

__all__ = [
    # Config
    "MAX_PRECISION",
    "EXP_LIMIT",
    "DEFAULT_PRECISION",
    "DEFAULT_EXP_NOTATION_NEG",
    "DEFAULT_EXP_NOTATION_POS",
    "DecimalConfig",
    # Modes
    "MODE_CODES",
    "RoundingMode",
    "ModuloMode",
    # Number
    "Kind",
    "Number",
    "NAN",
    "ONE",
    "ZERO",
    "zero",
    "infinity",
    "from_digits",
    "from_coefficient",
    # Value
    "Decimal",
]
