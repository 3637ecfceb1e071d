"""
Formatter — Number → текст

to_string:
- ноль → "0" (знак нуля не отображается)
- e < exp_notation_neg_threshold или e >= exp_notation_pos_threshold →
  экспоненциальная нотация d.ddde±N
- иначе plain fixed-point
- "Infinity", "-Infinity", "NaN"

Пороги читаются из снапшота конфигурации в момент форматирования.
"""

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import Number
from decimals.core.math.rounding import round_to_places


def _special(num: Number) -> str | None:
    """Текст для NaN / Infinity / нуля, иначе None."""
    if num.is_nan:
        return "NaN"
    if num.is_infinite:
        return "-Infinity" if num.negative else "Infinity"
    if num.is_zero:
        return "0"
    return None


def plain_digits(digits: str, exponent: int, places: int = 0) -> str:
    """
    Plain fixed-point запись модуля без знака.

    Args:
        digits: Значащие цифры
        exponent: Степень десяти первой цифры
        places: Минимальное число знаков после точки (дополняется нулями)

    Examples:
        >>> plain_digits("125", -2)
        '0.0125'
        >>> plain_digits("125", 4)
        '12500'
        >>> plain_digits("125", 0, 4)
        '1.2500'
    """
    if not digits:
        integer, fraction = "0", ""
    elif exponent < 0:
        integer, fraction = "0", "0" * (-exponent - 1) + digits
    elif len(digits) > exponent + 1:
        integer, fraction = digits[: exponent + 1], digits[exponent + 1 :]
    else:
        integer, fraction = digits + "0" * (exponent + 1 - len(digits)), ""

    fraction = fraction.ljust(places, "0")
    return f"{integer}.{fraction}" if fraction else integer


def exponential_digits(digits: str, exponent: int) -> str:
    """
    Экспоненциальная запись модуля без знака: d.ddde±N.

    Examples:
        >>> exponential_digits("1", 21)
        '1e+21'
        >>> exponential_digits("15", -8)
        '1.5e-8'
    """
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def to_string(num: Number, config: DecimalConfig) -> str:
    """
    Каноническая текстовая форма значения.

    Args:
        num: Значение
        config: Снапшот конфигурации (пороги нотации)

    Examples:
        >>> from decimals.core.domain.number import from_digits
        >>> to_string(from_digits(1, "1", 21), DecimalConfig())
        '1e+21'
        >>> to_string(from_digits(-1, "15", -8), DecimalConfig())
        '-1.5e-8'
    """
    special = _special(num)
    if special is not None:
        return special

    e = num.exponent
    if e < config.exp_notation_neg_threshold or e >= config.exp_notation_pos_threshold:
        body = exponential_digits(num.digits, e)
    else:
        body = plain_digits(num.digits, e)

    return f"-{body}" if num.negative else body


def to_fixed(
    num: Number,
    places: int | None,
    config: DecimalConfig,
    rounding: RoundingMode | None = None,
) -> str:
    """
    Plain fixed-point запись с ровно places знаками после точки.

    Args:
        num: Значение
        places: Число знаков после точки (None: без округления, plain форма)
        config: Снапшот конфигурации (режим округления по умолчанию)
        rounding: Переопределение config.rounding

    Returns:
        Текст; "NaN" / "Infinity" / "-Infinity" для не-конечных значений

    Examples:
        >>> from decimals.core.domain.number import from_digits
        >>> to_fixed(from_digits(1, "2345", 0), 2, DecimalConfig())
        '2.35'
        >>> to_fixed(from_digits(-1, "1", -3), 2, DecimalConfig())
        '-0.00'
    """
    if num.is_nan or num.is_infinite:
        return _special(num)

    if places is None:
        body = plain_digits(num.digits, num.exponent)
    else:
        mode = rounding if rounding is not None else config.rounding
        rounded = round_to_places(num, places, mode)
        body = plain_digits(rounded.digits, rounded.exponent, places)

    return f"-{body}" if num.negative and not num.is_zero else body
