"""
Power — x ** y над Number

Две ветки:
1. Целый y с |y| < 10**16: возведение в степень через квадраты.
   Промежуточные произведения точные, пока помещаются в рабочую точность
   (precision + GUARD_DIGITS + цифры |y|), дальше усекаются со sticky-флагом.
   Одно финальное округление. Отрицательный y: 1 / x**|y|.
2. Остальные y: exp(y * ln(x)) на рабочей точности с уточнением хвоста.

Special cases:
- NaN операнд → NaN
- x**0 = 1, но Infinity**0 = NaN
- 0**y: y > 0 → 0, y < 0 → Infinity (знак у нечётной степени -0)
- Infinity**y: y > 0 → Infinity, y < 0 → 0 (знак у нечётной степени -Infinity)
- x**±Infinity: по |x| относительно 1, |x| == 1 → NaN
- 1**y = 1
- отрицательное x с нецелым y → NaN
- оценка экспоненты за лимитами → Infinity / Zero
"""

import math
from typing import Final

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.digits import digit_count
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import (
    NAN,
    ONE,
    Kind,
    Number,
    from_coefficient,
    infinity,
    zero,
)
from decimals.core.math.arithmetic import compare_magnitude, divide
from decimals.core.math.rounding import finalise
from decimals.core.math.transcendental import (
    GUARD_DIGITS,
    LN10,
    correctly_rounded,
    estimate_log10,
    fixed_power,
    ln,
)

# Максимальная экспонента целого y для ветки через квадраты
SQUARING_EXPONENT_LIMIT: Final[int] = 16

# Точность оценки ln(x) для прогноза overflow/underflow
ESTIMATE_PRECISION: Final[int] = 20

# |y * ln(x)| >= 10**17 гарантирует overflow/underflow при |e| <= 9e15
LOG_MAGNITUDE_LIMIT: Final[float] = 17.0


# =============================================================================
# HELPERS
# =============================================================================


def is_odd_integer(y: Number) -> bool:
    """Является ли y нечётным целым."""
    return y.kind is Kind.FINITE and y.scale == 0 and int(y.digits[-1]) % 2 == 1


def _truncate(c: int, s: int, digits: int) -> tuple[int, int, bool]:
    """
    Усечение c * 10**s до digits цифр.

    Returns:
        (c', s', cut): cut = были ли отброшены ненулевые цифры
    """
    excess = digit_count(c) - digits
    if excess <= 0:
        return c, s, False

    q, r = divmod(c, 10**excess)
    return q, s + excess, r != 0


def _power_by_squaring(x: Number, n: int, working: int) -> Number:
    """
    |x| ** n (n >= 1) с рабочей точностью working.

    Усечённый результат получает sticky-цифру, чтобы финальное округление
    видело признак inexact.
    """
    result_c, result_s = 1, 0
    base_c, base_s = x.coefficient, x.scale
    cut = False

    while True:
        if n & 1:
            result_c, result_s, t = _truncate(result_c * base_c, result_s + base_s, working)
            cut |= t
        n >>= 1
        if not n:
            break
        base_c, base_s, t = _truncate(base_c * base_c, 2 * base_s, working)
        cut |= t

    if cut:
        result_c = result_c * 10 + 1
        result_s -= 1

    return from_coefficient(1, result_c, result_s)


def _result_log10(x: Number, y: Number) -> float:
    """
    Оценка log10(|x ** y|) для конечных ненулевых x, y, |x| != 1.

    Для |y * ln(x)| >= 10**17 возвращает ±inf.
    """
    estimate_config = DecimalConfig(precision=ESTIMATE_PRECISION)
    log_x = ln(x.with_sign(1), estimate_config)
    if log_x.is_zero:
        return 0.0

    magnitude = estimate_log10(log_x) + estimate_log10(y)
    sign = log_x.sign * y.sign
    if magnitude >= LOG_MAGNITUDE_LIMIT:
        return math.copysign(math.inf, sign)

    return sign * 10.0**magnitude / LN10


def _beyond_limits(log10_estimate: float, sign: int, config: DecimalConfig) -> Number | None:
    """Infinity / Zero, если оценка экспоненты за лимитами конфигурации."""
    if log10_estimate > config.max_exponent + 1:
        return infinity(sign)
    if log10_estimate < config.min_exponent - 1:
        return zero(sign)
    return None


# =============================================================================
# PUBLIC
# =============================================================================


def power(
    x: Number,
    y: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    x ** y, округлённое до precision.

    Args:
        x: Основание
        y: Показатель
        config: Снапшот конфигурации
        precision: Переопределение config.precision
        rounding: Переопределение config.rounding

    Returns:
        Результат с не более чем precision значащими цифрами

    Examples:
        >>> cfg = DecimalConfig()
        >>> power(from_coefficient(1, 2, 0), from_coefficient(1, 10, 0), cfg).digits
        '1024'
    """
    if x.is_nan or y.is_nan:
        return NAN

    if y.is_zero:
        return NAN if x.is_infinite else ONE

    odd = is_odd_integer(y)
    sign = x.sign if odd else 1

    if x.is_zero:
        return zero(sign) if y.sign > 0 else infinity(sign)

    if x.is_infinite:
        return infinity(sign) if y.sign > 0 else zero(sign)

    if y.is_infinite:
        cmp = compare_magnitude(x, ONE)
        if cmp == 0:
            return NAN
        return infinity(1) if cmp == y.sign else zero(1)

    if x == ONE:
        return ONE

    if x.negative and not y.is_integer:
        return NAN

    p = precision if precision is not None else config.precision

    if compare_magnitude(x, ONE) == 0:
        # |x| == 1, x == -1
        return ONE.with_sign(sign)

    if y.is_integer and y.exponent < SQUARING_EXPONENT_LIMIT:
        n = y.coefficient * 10**y.scale
        estimate = estimate_log10(x) * n * y.sign
        limited = _beyond_limits(estimate, sign, config)
        if limited is not None:
            return limited

        working = p + GUARD_DIGITS + digit_count(n)
        magnitude = _power_by_squaring(x, n, working)

        if y.negative:
            return divide(ONE.with_sign(sign), magnitude, config, p, rounding)
        return finalise(magnitude.with_sign(sign), config, p, rounding)

    limited = _beyond_limits(_result_log10(x, y), sign, config)
    if limited is not None:
        return limited

    xc, xe = x.coefficient, x.scale
    yc, ye = y.sign * y.coefficient, y.scale

    coeff, exponent = correctly_rounded(lambda working: fixed_power(xc, xe, yc, ye, working), p)
    return finalise(from_coefficient(sign, coeff, exponent), config, p, rounding)
