"""
Core math modules

Алгоритмы над Number: округление, арифметика, modulo, ln/exp/sqrt, pow.
Все функции принимают снапшот DecimalConfig явно.
"""

# Rounding
from decimals.core.math.rounding import (
    Rounded,
    apply_exponent_limits,
    finalise,
    round_digits,
    round_number,
    round_to_places,
    should_increment,
)

# Arithmetic
from decimals.core.math.arithmetic import (
    absolute,
    add,
    compare,
    compare_magnitude,
    divide,
    multiply,
    negate,
    subtract,
)

# Modulo
from decimals.core.math.modulo import modulo

# Transcendental
from decimals.core.math.transcendental import GUARD_DIGITS, exp, ln, sqrt

# Power
from decimals.core.math.power import power

__all__ = [
    # Rounding
    "Rounded",
    "should_increment",
    "round_digits",
    "round_number",
    "round_to_places",
    "apply_exponent_limits",
    "finalise",
    # Arithmetic
    "compare",
    "compare_magnitude",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "absolute",
    # Modulo
    "modulo",
    # Transcendental
    "GUARD_DIGITS",
    "ln",
    "exp",
    "sqrt",
    # Power
    "power",
]
