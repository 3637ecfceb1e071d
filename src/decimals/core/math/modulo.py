"""
Modulo Engine — a mod n по пяти дисциплинам

remainder = a - b * q, где q = round_to_integer(a / b, mode):

| mode       | q                           | знак остатка              |
|------------|-----------------------------|---------------------------|
| UP         | от нуля                     | противоположен делимому   |
| DOWN       | к нулю (truncation)         | как у делимого            |
| FLOOR      | к -∞                        | как у делителя            |
| HALF_EVEN  | к ближайшему, tie к чётному | IEEE 754 remainder        |
| EUCLID     | sign(b) * floor(a / |b|)    | всегда неотрицательный    |

Частное не материализуется: остаток усечённого деления считается модульной
арифметикой (pow(10, k, 2n)), поэтому огромная экспонента делимого безопасна.

Special cases: b == 0, 0 mod 0, NaN/Infinity операнды → NaN.
"""

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.modes import ModuloMode
from decimals.core.domain.number import NAN, Number, from_coefficient, zero
from decimals.core.math.arithmetic import add, compare_magnitude
from decimals.core.math.rounding import finalise, should_increment


def _quotient_increments(
    mode: ModuloMode,
    remainder_nonzero: bool,
    half_cmp: int,
    quotient_odd: bool,
    quotient_negative: bool,
    dividend_negative: bool,
) -> bool:
    """
    Увеличивается ли модуль усечённого частного.

    Args:
        mode: Режим modulo
        remainder_nonzero: Усечённый остаток ненулевой
        half_cmp: Сравнение 2*|r| с |b| (-1, 0, 1)
        quotient_odd: Усечённое частное нечётное
        quotient_negative: Знак точного частного a / b
        dividend_negative: Знак делимого
    """
    if not remainder_nonzero:
        return False

    if mode is ModuloMode.EUCLID:
        return dividend_negative

    # Дробная часть частного в виде rounding digit + residue
    if half_cmp < 0:
        rounding_digit = 4
    else:
        rounding_digit = 5

    return should_increment(
        mode.quotient_rounding,
        quotient_negative,
        1 if quotient_odd else 0,
        rounding_digit,
        half_cmp != 0,
    )


def modulo(a: Number, b: Number, mode: ModuloMode, config: DecimalConfig) -> Number:
    """
    a mod b по режиму mode, остаток округлён до config.precision.

    Args:
        a: Делимое
        b: Делитель
        mode: Режим modulo
        config: Снапшот конфигурации

    Returns:
        Остаток; NaN для b == 0 и для NaN/Infinity операндов

    Examples:
        >>> from decimals.core.domain.number import from_coefficient
        >>> cfg = DecimalConfig()
        >>> r = modulo(from_coefficient(-1, 7, 0), from_coefficient(1, 3, 0), ModuloMode.FLOOR, cfg)
        >>> (r.sign, r.digits)
        (1, '2')
    """
    if not (a.is_finite and b.is_finite) or b.is_zero:
        return NAN

    if a.is_zero:
        return a

    quotient_negative = a.sign != b.sign

    if compare_magnitude(a, b) < 0:
        # |a| < |b|: усечённое частное 0, усечённый остаток = a
        doubled = from_coefficient(1, 2 * a.coefficient, a.scale)
        half_cmp = compare_magnitude(doubled, b)

        if _quotient_increments(mode, True, half_cmp, False, quotient_negative, a.negative):
            # a - b * (±1): модуль |b| - |a|, знак противоположен делимому
            return add(a, b.with_sign(-a.sign), config)
        return finalise(a, config)

    # |a| >= |b|: выравнивание по общей младшей экспоненте
    scale = min(a.scale, b.scale)
    divisor = b.coefficient * 10 ** (b.scale - scale)
    modulus = 2 * divisor

    residue = a.coefficient * pow(10, a.scale - scale, modulus) % modulus
    remainder = residue % divisor
    quotient_odd = residue >= divisor

    twice = 2 * remainder
    half_cmp = (twice > divisor) - (twice < divisor)

    if _quotient_increments(
        mode, remainder != 0, half_cmp, quotient_odd, quotient_negative, a.negative
    ):
        magnitude = divisor - remainder
        sign = -a.sign
    else:
        magnitude = remainder
        sign = a.sign

    if magnitude == 0:
        return zero(a.sign)

    return finalise(from_coefficient(sign, magnitude, scale), config)
