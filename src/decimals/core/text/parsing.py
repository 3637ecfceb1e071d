"""
Numeral Parser — закрытое множество входов → Number

Входы:
- str: [+-]digits[.digits][e[+-]digits], [+-].digits[...], [+-]Infinity, [+-]NaN
- int: точно, любая длина
- float: по repr (кратчайшая round-trip форма), nan/inf → NaN/Infinity
- всё остальное (bool, None, ...) → InvalidNumber

Разбор точный: цифры не округляются до precision. Применяются только
лимиты экспоненты конфигурации (overflow → Infinity, underflow → Zero).
"""

import re
from typing import Any, Final

from decimals.core.domain.config import EXP_LIMIT, DecimalConfig
from decimals.core.domain.digits import int_to_digits
from decimals.core.domain.number import NAN, Number, from_digits, infinity
from decimals.core.errors import InvalidNumber
from decimals.core.math.rounding import apply_exponent_limits

NUMERAL_PATTERN: Final[re.Pattern] = re.compile(
    r"^([+-])?(?:([0-9]+)(?:\.([0-9]*))?|\.([0-9]+))(?:[eE]([+-]?[0-9]+))?$"
)

SPECIAL_PATTERN: Final[re.Pattern] = re.compile(r"^([+-])?(Infinity|NaN)$")

# Длина литерала экспоненты, заведомо превышающего EXP_LIMIT
_EXPONENT_LITERAL_MAX_LEN: Final[int] = len(str(EXP_LIMIT)) + 1


def _parse_text(text: str) -> Number:
    """Разбор numeral text без лимитов экспоненты."""
    special = SPECIAL_PATTERN.match(text)
    if special:
        sign = -1 if special.group(1) == "-" else 1
        return infinity(sign) if special.group(2) == "Infinity" else NAN

    match = NUMERAL_PATTERN.match(text)
    if match is None:
        raise InvalidNumber(text)

    sign_text, integer, fraction, bare_fraction, exponent_text = match.groups()
    sign = -1 if sign_text == "-" else 1

    if bare_fraction is not None:
        integer, fraction = "", bare_fraction
    fraction = fraction or ""

    exponent = 0
    if exponent_text is not None:
        magnitude_text = exponent_text.lstrip("+-").lstrip("0")
        if len(magnitude_text) > _EXPONENT_LITERAL_MAX_LEN:
            raise InvalidNumber(text, "exponent out of range")
        exponent = int(exponent_text)
        if abs(exponent) > EXP_LIMIT:
            raise InvalidNumber(text, "exponent out of range")

    # Степень десяти первой цифры integer + fraction
    return from_digits(sign, integer + fraction, exponent + len(integer) - 1)


def parse_numeral(value: Any, config: DecimalConfig) -> Number:
    """
    Разбор входного значения в Number.

    Args:
        value: str, int или float
        config: Снапшот конфигурации (лимиты экспоненты)

    Returns:
        Number, точный до лимитов экспоненты

    Raises:
        InvalidNumber: Если value не numeral text и не native number

    Examples:
        >>> parse_numeral("-12.50e3", DecimalConfig())
        Number(sign=-1, digits='125', exponent=4, kind=<Kind.FINITE: 'finite'>)
        >>> parse_numeral(0.1, DecimalConfig()).digits
        '1'
    """
    if isinstance(value, bool):
        raise InvalidNumber(value, "booleans are not numbers")

    if isinstance(value, str):
        num = _parse_text(value)
    elif isinstance(value, int):
        sign = -1 if value < 0 else 1
        digits = int_to_digits(abs(value))
        num = from_digits(sign, digits, len(digits) - 1)
    elif isinstance(value, float):
        num = _parse_text(_float_text(value))
    else:
        raise InvalidNumber(value, f"unsupported type {type(value).__name__}")

    return apply_exponent_limits(num, config)


def _float_text(value: float) -> str:
    """Кратчайшая round-trip форма float в синтаксисе numeral text."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)
