"""
Transcendental — ln, exp, sqrt с произвольной точностью

Все вычисления в целочисленной fixed-point арифметике: вещественное z
представлено целым, приближающим z * M (M = 10**p).

Примитивы:
- _ilog(x, M): M * log(x / M) через редукцию log1p(y) = 2 * log1p(y / (1 + sqrt(1 + y)))
  и ряд Тейлора
- _iexp(x, M): M * exp(x / M) через деление аргумента на 2**R, ряд expm1
  и R удвоений expm1(2x) = expm1(x) * (expm1(x) + 2)
- _dlog(c, e, p): 10**p * ln(c * 10**e), абсолютная ошибка <= 1
- _dexp(c, e, p): exp(c * 10**e) с p цифрами, ошибка <= 1 ulp (до 10 ulp у степени 10)
- fixed_power(xc, xe, yc, ye, p): x**y = exp(y * ln(x)) с p цифрами

Корректное округление: точность увеличивается на GUARD_DIGITS, пока хвост
результата не перестанет быть неоднозначным (около 0, половины или единицы
последнего разряда).
"""

import math
from typing import Callable, Final

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.digits import digit_count, digits_to_int, int_to_digits
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import (
    NAN,
    ONE,
    Number,
    from_coefficient,
    from_digits,
    infinity,
    zero,
)
from decimals.core.math.rounding import finalise

# Защитные цифры сверх precision для ln/exp/pow
GUARD_DIGITS: Final[int] = 10

# Допуск на ошибку последней цифры fixed-point результата
TAIL_MARGIN: Final[int] = 10

# Число уточнений точности до притягивания хвоста
MAX_REFINEMENTS: Final[int] = 3

LN10: Final[float] = math.log(10)

# |x| >= 10**17 гарантирует overflow/underflow exp(x) при |e| <= 9e15
EXP_ARGUMENT_LIMIT_EXPONENT: Final[int] = 17


# =============================================================================
# INTEGER PRIMITIVES
# =============================================================================


def _div_nearest(a: int, b: int) -> int:
    """Ближайшее целое к a / b (b > 0), tie к чётному."""
    q, r = divmod(a, b)
    return q + (2 * r + (q & 1) > b)


def _rshift_nearest(x: int, shift: int) -> int:
    """Ближайшее целое к x / 2**shift, tie к чётному."""
    b, q = 1 << shift, x >> shift
    return q + (2 * (x & (b - 1)) + (q & 1) > b)


def _sqrt_nearest(n: int) -> int:
    """Ближайшее целое к sqrt(n), n >= 0."""
    r = math.isqrt(n)
    return r + (n - r * r > r)


def _series_terms(M: int, L: int) -> int:
    """Число членов ряда: (2**L)**T > M."""
    return -(-10 * digit_count(M) // (3 * L))


def _ilog(x: int, M: int, L: int = 8) -> int:
    """
    Целочисленное приближение M * log(x / M).

    Для L = 8 и 0.1 <= x / M <= 10 абсолютная ошибка не превышает 22.
    """
    # y приближает 2**R * (x - M) / M * M, R = число выполненных редукций
    y = x - M
    R = 0
    while (R <= L and abs(y) << (L - R) >= M) or (R > L and abs(y) >> (R - L) >= M):
        y = _div_nearest((M * y) << 1, M + _sqrt_nearest(M * (M + _rshift_nearest(y, R))))
        R += 1

    T = _series_terms(M, L)
    yshift = _rshift_nearest(y, R)
    w = _div_nearest(M, T)
    for k in range(T - 1, 0, -1):
        w = _div_nearest(M, k) - _div_nearest(yshift * w, M)

    return _div_nearest(w * y, M)


def _iexp(x: int, M: int, L: int = 8) -> int:
    """
    Целочисленное приближение M * exp(x / M), 0 <= x / M <= 2.4.

    Абсолютная ошибка не превышает 60.
    """
    R = ((x << L) // M).bit_length()

    T = _series_terms(M, L)
    y = _div_nearest(x, T)
    Mshift = M << R
    for i in range(T - 1, 0, -1):
        y = _div_nearest(x * (Mshift + y), Mshift * i)

    for k in range(R - 1, -1, -1):
        Mshift = M << (k + 2)
        y = _div_nearest(y * (y + Mshift), Mshift)

    return M + y


class _Ln10Digits:
    """
    Кэш цифр ln(10) = 2.302585...

    Хранит только гарантированно верные цифры (усечение, не округление).
    """

    def __init__(self):
        self.digits = "23025850929940456840179914546843642076011014886"

    def __call__(self, p: int) -> int:
        """
        floor(10**p * ln(10)).

        Examples:
            >>> _Ln10Digits()(3)
            2302
        """
        if p < 0:
            raise ValueError(f"p must be non-negative, got {p}")

        if p >= len(self.digits):
            # Считаем p+3, p+6, ... цифр, пока хотя бы одна лишняя ненулевая
            extra = 3
            while True:
                M = 10 ** (p + extra + 2)
                digits = int_to_digits(_div_nearest(_ilog(10 * M, M), 100))
                if digits[-extra:] != "0" * extra:
                    break
                extra += 3
            self.digits = digits.rstrip("0")[:-1]

        return digits_to_int(self.digits[: p + 1])


_ln10_digits = _Ln10Digits()


def _dlog(c: int, e: int, p: int) -> int:
    """
    Приближение 10**p * ln(c * 10**e) с абсолютной ошибкой <= 1.

    c > 0, c * 10**e != 1.
    """
    # +2 цифры, компенсируется делением на 100
    p += 2

    # c * 10**e = d * 10**f: f >= 0 и 1 <= d <= 10, либо f <= 0 и 0.1 <= d <= 1
    length = digit_count(c)
    f = e + length - (e + length >= 1)

    if p > 0:
        k = e + p - f
        if k >= 0:
            c *= 10**k
        else:
            c = _div_nearest(c, 10**-k)
        log_d = _ilog(c, 10**p)
    else:
        log_d = 0

    f_log_ten = 0
    if f:
        extra = digit_count(abs(f)) - 1
        if p + extra >= 0:
            f_log_ten = _div_nearest(f * _ln10_digits(p + extra), 10**extra)

    return _div_nearest(f_log_ten + log_d, 100)


def _dexp(c: int, e: int, p: int) -> tuple[int, int]:
    """
    Приближение exp(c * 10**e) с p цифрами.

    Returns:
        (d, f): 10**(p-1) <= d <= 10**p, (d-1) * 10**f < exp(c * 10**e) < (d+1) * 10**f
    """
    p += 2

    # ln(10) с дополнительной точностью = adjusted exponent аргумента
    extra = max(0, e + digit_count(c) - 1)
    q = p + extra

    shift = e + q
    if shift >= 0:
        cshift = c * 10**shift
    else:
        cshift = c // 10**-shift

    quot, rem = divmod(cshift, _ln10_digits(q))
    rem = _div_nearest(rem, 10**extra)

    return _div_nearest(_iexp(rem, 10**p), 1000), quot - p + 3


def fixed_power(xc: int, xe: int, yc: int, ye: int, p: int) -> tuple[int, int]:
    """
    x**y = exp(y * ln(x)) с p цифрами, x = xc * 10**xe > 0, x != 1, y = yc * 10**ye != 0.

    Returns:
        (c, e): 10**(p-1) <= c <= 10**p, ошибка в c не более 1
    """
    # 10**(b-1) <= |y| <= 10**b
    b = digit_count(yc) + ye

    # ln(x) с p+b+1 знаками после точки
    lxc = _dlog(xc, xe, p + b + 1)

    # y * ln(x) = pc * 10**(-p-1)
    shift = ye - b
    if shift >= 0:
        pc = lxc * yc * 10**shift
    else:
        pc = _div_nearest(lxc * yc, 10**-shift)

    if pc == 0:
        # Результат не ровно 1: так проще корректно округлить
        if (digit_count(xc) + xe >= 1) == (yc > 0):
            return 10 ** (p - 1) + 1, 1 - p
        return 10**p - 1, -p

    coeff, exp = _dexp(pc, -(p + 1), p + 1)
    return _div_nearest(coeff, 10), exp + 1


# =============================================================================
# CORRECT ROUNDING
# =============================================================================


def tail_is_ambiguous(coeff: int, precision: int, margin: int = TAIL_MARGIN) -> bool:
    """
    Неоднозначен ли хвост приближения для округления до precision цифр.

    Хвост (цифры после precision) в пределах margin от 0, половины или
    единицы разряда означает, что ошибка приближения может сменить результат.

    Examples:
        >>> tail_is_ambiguous(12345000000000001, 5)
        True
        >>> tail_is_ambiguous(12345123456789012, 5)
        False
    """
    extra = digit_count(coeff) - precision
    if extra <= 1:
        return True

    unit = 10**extra
    tail = abs(coeff) % unit
    return min(tail, abs(tail - unit // 2), unit - tail) <= margin


def _settle_tail(coeff: int, precision: int, margin: int = TAIL_MARGIN) -> int:
    """
    Притягивание хвоста к ближайшей точке 0 / половина / единица разряда.

    Используется, когда результат остаётся неоднозначным после всех уточнений:
    это означает, что точный результат представим (например 4 ** 0.5 = 2).
    """
    extra = digit_count(coeff) - precision
    if extra <= 1:
        return coeff

    unit = 10**extra
    magnitude = abs(coeff)
    tail = magnitude % unit
    for anchor in (0, unit // 2, unit):
        if abs(tail - anchor) <= margin:
            magnitude += anchor - tail
            break
    return magnitude if coeff >= 0 else -magnitude


def correctly_rounded(
    compute: Callable[[int], tuple[int, int]],
    precision: int,
    start_extra: int = GUARD_DIGITS,
) -> tuple[int, int]:
    """
    Приближение (coeff, exponent), пригодное для округления до precision цифр.

    Args:
        compute: Функция working_digits → (coeff, exponent) с ошибкой в пару ulp
        precision: Целевое число значащих цифр
        start_extra: Начальный запас защитных цифр

    Returns:
        (coeff, exponent) с хвостом, однозначно определяющим округление
    """
    extra = start_extra
    for _ in range(MAX_REFINEMENTS):
        coeff, exponent = compute(precision + extra)
        if not tail_is_ambiguous(coeff, precision):
            return coeff, exponent
        extra += GUARD_DIGITS

    return _settle_tail(coeff, precision), exponent


def _ln_exponent_bound(c: int, e: int) -> int:
    """Нижняя граница adjusted exponent для ln(c * 10**e), c * 10**e != 1."""
    adjusted = e + digit_count(c) - 1

    if adjusted >= 1:
        # x >= 10: ln(x) >= adjusted * 2.3
        return digit_count(adjusted * 23 // 10) - 1
    if adjusted <= -2:
        # x < 0.1: |ln(x)| >= (-1 - adjusted) * 2.3
        return digit_count((-1 - adjusted) * 23 // 10) - 1

    if adjusted == 0:
        # 1 < x < 10: ln(x) >= (x - 1) / x
        return digit_count(c - 10**-e) - digit_count(c) - 1

    # 0.1 <= x < 1: |ln(x)| >= 1 - x
    return e + digit_count(10**-e - c) - 1


def estimate_log10(x: Number) -> float:
    """Оценка log10(|x|) для конечного ненулевого x."""
    mantissa = float(f"0.{x.digits[:20]}")
    return math.log10(mantissa) + x.exponent + 1


# =============================================================================
# PUBLIC
# =============================================================================


def ln(
    x: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    Натуральный логарифм, корректно округлённый до precision.

    Special cases: ln(0) = -Infinity, ln(Infinity) = Infinity, ln(1) = 0,
    ln(x < 0) = NaN, ln(NaN) = NaN.
    """
    if x.is_nan or (x.negative and not x.is_zero):
        return NAN
    if x.is_zero:
        return infinity(-1)
    if x.is_infinite:
        return infinity(1)
    if x == ONE:
        return zero(1)

    p = precision if precision is not None else config.precision
    c, e = x.coefficient, x.scale
    bound = _ln_exponent_bound(c, e)

    def compute(working: int) -> tuple[int, int]:
        places = working - bound
        return _dlog(c, e, places), -places

    coeff, exponent = correctly_rounded(compute, p)
    result = from_coefficient(1 if coeff > 0 else -1, coeff, exponent)
    return finalise(result, config, p, rounding)


def exp(
    x: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    e**x, корректно округлённое до precision.

    Special cases: exp(0) = 1, exp(Infinity) = Infinity, exp(-Infinity) = 0,
    exp(NaN) = NaN. Overflow/underflow по лимитам экспоненты конфигурации.
    """
    if x.is_nan:
        return NAN
    if x.is_infinite:
        return infinity(1) if x.sign > 0 else zero(1)
    if x.is_zero:
        return ONE

    p = precision if precision is not None else config.precision

    if x.exponent >= EXP_ARGUMENT_LIMIT_EXPONENT:
        return infinity(1) if x.sign > 0 else zero(1)

    mantissa = float(f"0.{x.digits[:20]}e{x.exponent + 1}")
    estimate = x.sign * mantissa / LN10
    if estimate > config.max_exponent + 1:
        return infinity(1)
    if estimate < config.min_exponent - 1:
        return zero(1)

    if x.exponent < -(p + 2):
        # |x| меньше половины ulp единицы: результат 1 ± sticky
        if x.sign > 0:
            tiny = from_digits(1, "1" + "0" * (p + 1) + "1", 0)
        else:
            tiny = from_digits(1, "9" * (p + 2), -1)
        return finalise(tiny, config, p, rounding)

    c, e = x.sign * x.coefficient, x.scale

    coeff, exponent = correctly_rounded(lambda working: _dexp(c, e, working), p)
    return finalise(from_coefficient(1, coeff, exponent), config, p, rounding)


def sqrt(
    x: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    Квадратный корень, корректно округлённый до precision.

    Special cases: sqrt(-0) = -0, sqrt(Infinity) = Infinity, sqrt(x < 0) = NaN.
    """
    if x.is_nan:
        return NAN
    if x.is_zero:
        return x
    if x.negative:
        return NAN
    if x.is_infinite:
        return x

    p = precision if precision is not None else config.precision

    c, scale = x.coefficient, x.scale
    if scale % 2:
        c *= 10
        scale -= 1

    # Корень должен иметь хотя бы p + 1 цифру
    shift = max(0, p + 2 - (digit_count(c) + 1) // 2)
    n = c * 10 ** (2 * shift)
    root = math.isqrt(n)
    result_scale = scale // 2 - shift

    if root * root != n:
        root = root * 10 + 1
        result_scale -= 1

    return finalise(from_coefficient(1, root, result_scale), config, p, rounding)
