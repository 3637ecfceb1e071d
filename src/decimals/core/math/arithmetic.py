"""
Arithmetic — сравнение, сложение, умножение, деление над Number

Все операции:
- точные на целых коэффициентах, затем одно финальное округление (finalise)
- IEEE-подобные special cases: NaN пропагирует, ∞ - ∞ = NaN, ∞ * 0 = NaN,
  ∞ / ∞ = NaN, 0 / 0 = NaN, x / ∞ = 0
- деление конечного ненулевого на ноль → DivisionByZero

Конфигурация передаётся явно (снапшот), никакого ambient lookup.
"""

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import (
    NAN,
    Kind,
    Number,
    from_coefficient,
    infinity,
    zero,
)
from decimals.core.errors import DivisionByZero
from decimals.core.math.rounding import finalise


# =============================================================================
# COMPARISON
# =============================================================================


def compare_magnitude(a: Number, b: Number) -> int:
    """
    Сравнение |a| и |b| для FINITE значений.

    Returns:
        -1, 0 или 1
    """
    if a.exponent != b.exponent:
        return 1 if a.exponent > b.exponent else -1

    width = max(len(a.digits), len(b.digits))
    da = a.digits.ljust(width, "0")
    db = b.digits.ljust(width, "0")

    if da == db:
        return 0
    return 1 if da > db else -1


def compare(a: Number, b: Number) -> int | None:
    """
    Сравнение двух значений.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b, None если любой операнд NaN

    Examples:
        >>> compare(Number(1, "1", 0, Kind.FINITE), Number(1, "1", 0, Kind.FINITE))
        0
    """
    if a.is_nan or b.is_nan:
        return None

    if a.is_infinite or b.is_infinite:
        if a.is_infinite and b.is_infinite and a.sign == b.sign:
            return 0
        return a.sign if a.is_infinite else -b.sign

    if a.is_zero or b.is_zero:
        if a.is_zero and b.is_zero:
            return 0
        return -b.sign if a.is_zero else a.sign

    if a.sign != b.sign:
        return a.sign

    return compare_magnitude(a, b) * a.sign


# =============================================================================
# ADDITION
# =============================================================================


def _sticky_operand(big: Number, small: Number, precision: int) -> Number:
    """
    Замена пренебрежимо малого слагаемого на единицу ниже разряда округления.

    Добавление 10**bound к big даёт тот же результат после округления, что и
    добавление любого меньшего по модулю значения того же знака. Это ограничивает
    размер выравнивания при огромной разнице экспонент.
    """
    bound = min(big.scale - 1, big.exponent - precision - 1)
    if small.exponent < bound:
        return Number(small.sign, "1", bound, Kind.FINITE)
    return small


def add(
    a: Number,
    b: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    a + b, округлённое до precision.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        config: Снапшот конфигурации
        precision: Переопределение config.precision
        rounding: Переопределение config.rounding
    """
    if a.is_nan or b.is_nan:
        return NAN

    if a.is_infinite or b.is_infinite:
        if a.is_infinite and b.is_infinite:
            return a if a.sign == b.sign else NAN
        return a if a.is_infinite else b

    if a.is_zero and b.is_zero:
        # -0 + -0 = -0, иначе +0
        return zero(-1 if a.negative and b.negative else 1)
    if a.is_zero:
        return finalise(b, config, precision, rounding)
    if b.is_zero:
        return finalise(a, config, precision, rounding)

    working = precision if precision is not None else config.precision
    if a.exponent >= b.exponent:
        b = _sticky_operand(a, b, working)
    else:
        a = _sticky_operand(b, a, working)

    scale = min(a.scale, b.scale)
    total = a.sign * a.coefficient * 10 ** (a.scale - scale) + b.sign * b.coefficient * 10 ** (
        b.scale - scale
    )

    if total == 0:
        # x - x = +0
        return zero(1)

    result = from_coefficient(1 if total > 0 else -1, total, scale)
    return finalise(result, config, precision, rounding)


def subtract(
    a: Number,
    b: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """a - b, округлённое до precision."""
    return add(a, b.negated(), config, precision, rounding)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply(
    a: Number,
    b: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """a * b, округлённое до precision."""
    if a.is_nan or b.is_nan:
        return NAN

    sign = a.sign * b.sign

    if a.is_infinite or b.is_infinite:
        if a.is_zero or b.is_zero:
            return NAN
        return infinity(sign)

    if a.is_zero or b.is_zero:
        return zero(sign)

    product = from_coefficient(sign, a.coefficient * b.coefficient, a.scale + b.scale)
    return finalise(product, config, precision, rounding)


# =============================================================================
# DIVISION
# =============================================================================


def divide(
    a: Number,
    b: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    a / b, корректно округлённое до precision.

    Частное вычисляется с precision + 1 цифрами минимум; ненулевой остаток
    добавляет sticky-цифру, поэтому округление видит точный признак inexact.

    Raises:
        DivisionByZero: если a конечное ненулевое, а b == 0
    """
    if a.is_nan or b.is_nan:
        return NAN

    sign = a.sign * b.sign

    if a.is_infinite:
        return NAN if b.is_infinite else infinity(sign)
    if b.is_infinite:
        return zero(sign)

    if b.is_zero:
        if a.is_zero:
            return NAN
        raise DivisionByZero(f"division of {'-' if a.negative else ''}finite value by zero")

    if a.is_zero:
        return zero(sign)

    working = precision if precision is not None else config.precision
    shift = max(0, working + 1 + len(b.digits) - len(a.digits))

    quotient, remainder = divmod(a.coefficient * 10**shift, b.coefficient)
    if remainder:
        quotient = quotient * 10 + 1
        shift += 1

    result = from_coefficient(sign, quotient, a.scale - b.scale - shift)
    return finalise(result, config, precision, rounding)


# =============================================================================
# UNARY
# =============================================================================


def negate(a: Number, config: DecimalConfig) -> Number:
    """-a, округлённое до precision."""
    return finalise(a.negated(), config)


def absolute(a: Number, config: DecimalConfig) -> Number:
    """|a|, округлённое до precision."""
    return finalise(a.with_sign(1), config)
