"""
Number — внутреннее представление десятичного значения

Number = (sign, digits, exponent, kind):
- sign: -1 или +1
- digits: значащие цифры без ведущих и хвостовых нулей ("" для не-FINITE)
- exponent: степень десяти старшей цифры (1234.5 → digits="12345", exponent=3)
- kind: FINITE, ZERO, INFINITY, NAN

Значение FINITE = sign * 0.d1d2...dn * 10**(exponent + 1).

Все алгоритмы core.math работают над Number и ничего не знают об Engine.
"""

from enum import Enum
from typing import NamedTuple

from .digits import digit_count, digits_to_int, int_to_digits


class Kind(str, Enum):
    """Категория значения"""

    FINITE = "finite"
    ZERO = "zero"
    INFINITY = "infinity"
    NAN = "nan"


class Number(NamedTuple):
    """Нормализованное десятичное значение (immutable)."""

    sign: int
    digits: str
    exponent: int
    kind: Kind

    @property
    def negative(self) -> bool:
        return self.sign < 0

    @property
    def is_finite(self) -> bool:
        """FINITE или ZERO"""
        return self.kind in (Kind.FINITE, Kind.ZERO)

    @property
    def is_zero(self) -> bool:
        return self.kind is Kind.ZERO

    @property
    def is_nan(self) -> bool:
        return self.kind is Kind.NAN

    @property
    def is_infinite(self) -> bool:
        return self.kind is Kind.INFINITY

    @property
    def coefficient(self) -> int:
        """Целый коэффициент |value| = coefficient * 10**scale"""
        return digits_to_int(self.digits)

    @property
    def scale(self) -> int:
        """Степень десяти младшей значащей цифры"""
        return self.exponent - len(self.digits) + 1

    @property
    def is_integer(self) -> bool:
        if self.kind is Kind.ZERO:
            return True
        return self.kind is Kind.FINITE and self.scale >= 0

    def negated(self) -> "Number":
        if self.kind is Kind.NAN:
            return self
        return self._replace(sign=-self.sign)

    def with_sign(self, sign: int) -> "Number":
        if self.kind is Kind.NAN:
            return self
        return self._replace(sign=1 if sign >= 0 else -1)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

NAN = Number(1, "", 0, Kind.NAN)
POSITIVE_INFINITY = Number(1, "", 0, Kind.INFINITY)
NEGATIVE_INFINITY = Number(-1, "", 0, Kind.INFINITY)
ZERO = Number(1, "", 0, Kind.ZERO)
ONE = Number(1, "1", 0, Kind.FINITE)


def zero(sign: int = 1) -> Number:
    return Number(1 if sign >= 0 else -1, "", 0, Kind.ZERO)


def infinity(sign: int = 1) -> Number:
    return POSITIVE_INFINITY if sign >= 0 else NEGATIVE_INFINITY


def from_digits(sign: int, digits: str, exponent: int) -> Number:
    """
    Number из строки цифр (допускаются ведущие и хвостовые нули).

    Args:
        sign: Знак (-1 или +1)
        digits: Цифры; exponent относится к первой цифре строки
        exponent: Степень десяти первой цифры digits

    Examples:
        >>> from_digits(1, "00120", 4)
        Number(sign=1, digits='12', exponent=2, kind=<Kind.FINITE: 'finite'>)
    """
    stripped = digits.lstrip("0")
    if not stripped:
        return zero(sign)

    exponent -= len(digits) - len(stripped)
    return Number(1 if sign >= 0 else -1, stripped.rstrip("0"), exponent, Kind.FINITE)


def from_coefficient(sign: int, coefficient: int, scale: int) -> Number:
    """
    Number из sign * coefficient * 10**scale.

    Examples:
        >>> from_coefficient(-1, 15000, -3).digits
        '15'
        >>> from_coefficient(-1, 15000, -3).exponent
        1
    """
    if coefficient == 0:
        return zero(sign)

    coefficient = abs(coefficient)
    return from_digits(sign, int_to_digits(coefficient), scale + digit_count(coefficient) - 1)
