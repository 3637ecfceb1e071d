"""
Decimal — значение, привязанное к Engine

Decimal = Number + engine handle, который его создал. Операторы делегируют
в engine значения: конфигурация читается (снапшот) в момент операции, а не
в момент создания.

Операнды операторов: Decimal, int, float. Явные методы engine дополнительно
принимают numeral text.

Равенство по числовому значению (1.0 == 1.00). NaN не равен ничему, включая
себя, и неупорядочен. Арифметика с float идёт через repr(float), а сравнение
с float идёт по точному двоичному значению, поэтому hash согласован с
равенством для Decimal, int и float.
"""

import math
import sys
from typing import Any, Callable, Final

from .number import Kind, Number, from_coefficient

_PyHASH_MODULUS: Final[int] = sys.hash_info.modulus
_PyHASH_INF: Final[int] = sys.hash_info.inf
# Обратный к 10 по модулю _PyHASH_MODULUS (модуль простой)
_PyHASH_10INV: Final[int] = pow(10, _PyHASH_MODULUS - 2, _PyHASH_MODULUS)


def exact_float(value: float) -> Number:
    """
    Точное десятичное значение конечного float: n / 2**k == n * 5**k / 10**k.

    Examples:
        >>> exact_float(0.5).digits
        '5'
        >>> len(exact_float(0.1).digits)
        55
    """
    sign = -1 if math.copysign(1.0, value) < 0 else 1
    numerator, denominator = abs(value).as_integer_ratio()
    k = denominator.bit_length() - 1
    return from_coefficient(sign, numerator * 5**k, -k)


class Decimal:
    """
    Immutable десятичное значение произвольной точности.

    Создаётся через Engine.decimal(...) или decimals.decimal(...).

    Examples:
        >>> from decimals import decimal
        >>> decimal("0.1") + decimal("0.2") == decimal("0.3")
        True
        >>> str(decimal(2) ** 10)
        '1024'
    """

    __slots__ = ("_number", "_engine")

    def __init__(self, number: Number, engine: Any):
        self._number = number
        self._engine = engine

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def number(self) -> Number:
        """Внутреннее представление (sign, digits, exponent, kind)"""
        return self._number

    @property
    def engine(self) -> Any:
        """Engine handle, создавший значение"""
        return self._engine

    @property
    def sign(self) -> int:
        return self._number.sign

    @property
    def digits(self) -> str:
        return self._number.digits

    @property
    def exponent(self) -> int:
        """Степень десяти старшей значащей цифры"""
        return self._number.exponent

    @property
    def kind(self) -> Kind:
        return self._number.kind

    @property
    def precision(self) -> int:
        """Число значащих цифр (0 для нуля и не-конечных значений)"""
        return len(self._number.digits)

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_zero(self) -> bool:
        return self._number.is_zero

    def is_negative(self) -> bool:
        """Отрицательный знак (включая -0 и -Infinity), NaN → False"""
        return not self._number.is_nan and self._number.negative

    def is_positive(self) -> bool:
        """Положительный знак (включая +0 и Infinity), NaN → False"""
        return not self._number.is_nan and not self._number.negative

    def is_finite(self) -> bool:
        return self._number.is_finite

    def is_nan(self) -> bool:
        return self._number.is_nan

    def is_integer(self) -> bool:
        return self._number.is_integer

    # =========================================================================
    # METHODS
    # =========================================================================

    def compare(self, other: Any) -> int | None:
        """-1, 0, 1 или None (NaN операнд)"""
        return self._engine.compare(self, other)

    def sqrt(self) -> "Decimal":
        return self._engine.sqrt(self)

    def exp(self) -> "Decimal":
        return self._engine.exp(self)

    def ln(self) -> "Decimal":
        return self._engine.ln(self)

    def pow(self, exponent: Any) -> "Decimal":
        return self._engine.pow(self, exponent)

    def to_decimal_places(self, places: int, rounding: Any = None) -> "Decimal":
        return self._engine.to_decimal_places(self, places, rounding)

    def to_significant_digits(self, significant_digits: int, rounding: Any = None) -> "Decimal":
        return self._engine.to_significant_digits(self, significant_digits, rounding)

    def to_fixed(self, places: int | None = None, rounding: Any = None) -> str:
        return self._engine.to_fixed(self, places, rounding)

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def _operand(self, other: Any) -> "Decimal | None":
        """Decimal для операнда оператора или None (NotImplemented)."""
        if isinstance(other, Decimal):
            return other
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return None
        return self._engine.decimal(other)

    def _comparand(self, other: Any) -> "Decimal | None":
        """Операнд сравнения: конечный float берётся по точному значению."""
        if isinstance(other, float) and math.isfinite(other):
            return Decimal(exact_float(other), self._engine)
        return self._operand(other)

    def _binary(self, other: Any, operation: str, reflected: bool = False) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented

        func = getattr(self._engine, operation)
        if reflected:
            return func(operand, self)
        return func(self, operand)

    def __add__(self, other: Any) -> "Decimal":
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> "Decimal":
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> "Decimal":
        return self._binary(other, "subtract")

    def __rsub__(self, other: Any) -> "Decimal":
        return self._binary(other, "subtract", reflected=True)

    def __mul__(self, other: Any) -> "Decimal":
        return self._binary(other, "multiply")

    def __rmul__(self, other: Any) -> "Decimal":
        return self._binary(other, "multiply", reflected=True)

    def __truediv__(self, other: Any) -> "Decimal":
        return self._binary(other, "divide")

    def __rtruediv__(self, other: Any) -> "Decimal":
        return self._binary(other, "divide", reflected=True)

    def __mod__(self, other: Any) -> "Decimal":
        return self._binary(other, "modulo")

    def __rmod__(self, other: Any) -> "Decimal":
        return self._binary(other, "modulo", reflected=True)

    def __pow__(self, other: Any) -> "Decimal":
        return self._binary(other, "pow")

    def __rpow__(self, other: Any) -> "Decimal":
        return self._binary(other, "pow", reflected=True)

    def __neg__(self) -> "Decimal":
        return self._engine.negate(self)

    def __pos__(self) -> "Decimal":
        return self

    def __abs__(self) -> "Decimal":
        return self._engine.absolute(self)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _order(self, other: Any, accept: Callable[[int], bool]) -> Any:
        operand = self._comparand(other)
        if operand is None:
            return NotImplemented
        result = self._engine.compare(self, operand)
        return result is not None and accept(result)

    def __eq__(self, other: Any) -> bool:
        operand = self._comparand(other)
        if operand is None:
            return NotImplemented
        return self._engine.compare(self, operand) == 0

    def __lt__(self, other: Any) -> bool:
        return self._order(other, lambda r: r < 0)

    def __le__(self, other: Any) -> bool:
        return self._order(other, lambda r: r <= 0)

    def __gt__(self, other: Any) -> bool:
        return self._order(other, lambda r: r > 0)

    def __ge__(self, other: Any) -> bool:
        return self._order(other, lambda r: r >= 0)

    def __hash__(self) -> int:
        """Числовой hash: hash(decimal(5)) == hash(5)."""
        num = self._number

        if num.is_nan:
            return object.__hash__(self)
        if num.is_infinite:
            return -_PyHASH_INF if num.negative else _PyHASH_INF
        if num.is_zero:
            return 0

        if num.scale >= 0:
            exp_hash = pow(10, num.scale, _PyHASH_MODULUS)
        else:
            exp_hash = pow(_PyHASH_10INV, -num.scale, _PyHASH_MODULUS)

        hash_ = num.coefficient * exp_hash % _PyHASH_MODULUS
        ans = -hash_ if num.negative else hash_
        return -2 if ans == -1 else ans

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def __bool__(self) -> bool:
        return not self._number.is_zero

    def __float__(self) -> float:
        num = self._number
        if num.is_nan:
            return float("nan")
        if num.is_infinite:
            return float("-inf") if num.negative else float("inf")
        if num.is_zero:
            return -0.0 if num.negative else 0.0

        sign = "-" if num.negative else ""
        return float(f"{sign}0.{num.digits}e{num.exponent + 1}")

    def __int__(self) -> int:
        """Усечение к нулю."""
        num = self._number
        if num.is_nan:
            raise ValueError("cannot convert NaN to integer")
        if num.is_infinite:
            raise OverflowError("cannot convert Infinity to integer")
        if num.is_zero:
            return 0

        if num.scale >= 0:
            magnitude = num.coefficient * 10**num.scale
        else:
            magnitude = num.coefficient // 10**-num.scale
        return -magnitude if num.negative else magnitude

    def __str__(self) -> str:
        return self._engine.to_string(self)

    def __repr__(self) -> str:
        return f"Decimal('{self}')"
