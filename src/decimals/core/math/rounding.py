"""
Rounding Engine — округление последовательности цифр до precision

Чистая функция: round(digits, exponent, precision, mode) → (digits', exponent').

Алгоритм:
1. Отрезаем digits после позиции precision
2. rounding digit: первая отброшенная цифра
3. residue: есть ли ненулевые цифры после rounding digit
4. Режим решает, увеличивать ли модуль последней сохранённой цифры
5. Перенос из старшей цифры увеличивает exponent на 1

precision <= 0 означает, что значение меньше единицы последнего разряда:
результат либо ноль, либо одна единица этого разряда.
"""

from typing import NamedTuple

from decimals.core.domain.config import DecimalConfig
from decimals.core.domain.digits import digits_to_int, int_to_digits
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import Kind, Number, infinity, zero


class Rounded(NamedTuple):
    """Результат округления."""

    digits: str  # без хвостовых нулей; "" означает ноль
    exponent: int
    inexact: bool  # были ли отброшены ненулевые цифры


# =============================================================================
# INCREMENT DECISION
# =============================================================================


def should_increment(
    mode: RoundingMode,
    negative: bool,
    last_digit: int,
    rounding_digit: int,
    residue: bool,
) -> bool:
    """
    Нужно ли увеличить модуль усечённого значения.

    Args:
        mode: Режим округления
        negative: Знак округляемого значения
        last_digit: Последняя сохранённая цифра (0 если сохранённых нет)
        rounding_digit: Первая отброшенная цифра
        residue: Есть ли ненулевые цифры после rounding_digit

    Returns:
        True если результат округляется от нуля (по модулю вверх)
    """
    inexact = rounding_digit != 0 or residue

    if mode is RoundingMode.UP:
        return inexact
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEIL:
        return inexact and not negative
    if mode is RoundingMode.FLOOR:
        return inexact and negative

    # half-* режимы: всё, кроме точной середины, идёт к ближайшему
    if rounding_digit != 5 or residue:
        return rounding_digit >= 5

    # Точная середина (tie)
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_EVEN:
        return last_digit % 2 == 1
    if mode is RoundingMode.HALF_CEIL:
        return not negative
    if mode is RoundingMode.HALF_FLOOR:
        return negative

    raise ValueError(f"unsupported rounding mode: {mode!r}")


# =============================================================================
# ROUND DIGITS
# =============================================================================


def round_digits(
    digits: str,
    exponent: int,
    precision: int,
    mode: RoundingMode,
    negative: bool = False,
) -> Rounded:
    """
    Округление digits до precision значащих цифр.

    Args:
        digits: Цифры, первая цифра ненулевая
        exponent: Степень десяти первой цифры
        precision: Целевое число значащих цифр (может быть <= 0)
        mode: Режим округления
        negative: Знак значения (для CEIL/FLOOR и HALF_CEIL/HALF_FLOOR)

    Returns:
        Rounded(digits, exponent, inexact)

    Examples:
        >>> round_digits("25", 0, 1, RoundingMode.HALF_EVEN)
        Rounded(digits='2', exponent=0, inexact=True)
        >>> round_digits("35", 0, 1, RoundingMode.HALF_EVEN)
        Rounded(digits='4', exponent=0, inexact=True)
        >>> round_digits("999", 2, 2, RoundingMode.HALF_UP)
        Rounded(digits='1', exponent=3, inexact=True)
    """
    if precision >= len(digits):
        return Rounded(digits.rstrip("0"), exponent, False)

    if precision < 0:
        kept = ""
        rounding_digit = 0
        residue = digits.strip("0") != ""
    else:
        kept = digits[:precision]
        rounding_digit = int(digits[precision])
        residue = digits[precision + 1 :].strip("0") != ""

    if rounding_digit == 0 and not residue:
        return Rounded(kept.rstrip("0"), exponent, False)

    last_digit = int(kept[-1]) if kept else 0

    if not should_increment(mode, negative, last_digit, rounding_digit, residue):
        return Rounded(kept.rstrip("0"), exponent, True)

    if not kept:
        # Единица в последнем сохраняемом разряде
        return Rounded("1", exponent - precision + 1, True)

    incremented = int_to_digits(digits_to_int(kept) + 1)
    if len(incremented) > len(kept):
        # Перенос: 999 → 1000
        exponent += 1

    return Rounded(incremented.rstrip("0"), exponent, True)


def round_number(num: Number, precision: int, mode: RoundingMode) -> tuple[Number, bool]:
    """
    Округление Number до precision значащих цифр (без лимитов экспоненты).

    Returns:
        (rounded_number, inexact); не-FINITE значения возвращаются без изменений
    """
    if num.kind is not Kind.FINITE:
        return num, False

    rounded = round_digits(num.digits, num.exponent, precision, mode, num.negative)
    if not rounded.digits:
        return zero(num.sign), rounded.inexact

    return Number(num.sign, rounded.digits, rounded.exponent, Kind.FINITE), rounded.inexact


def round_to_places(num: Number, places: int, mode: RoundingMode) -> Number:
    """
    Округление до places знаков после десятичной точки.

    places может быть отрицательным (округление до десятков, сотен...).

    Examples:
        >>> round_to_places(Number(1, "25", 0, Kind.FINITE), 0, RoundingMode.HALF_EVEN).digits
        '2'
    """
    if num.kind is not Kind.FINITE:
        return num

    rounded, _ = round_number(num, num.exponent + places + 1, mode)
    return rounded


# =============================================================================
# FINALISE
# =============================================================================


def apply_exponent_limits(num: Number, config: DecimalConfig) -> Number:
    """
    Overflow → signed Infinity, underflow → signed Zero.

    Args:
        num: Значение
        config: Снапшот конфигурации (min_exponent, max_exponent)
    """
    if num.kind is not Kind.FINITE:
        return num

    if num.exponent > config.max_exponent:
        return infinity(num.sign)
    if num.exponent < config.min_exponent:
        return zero(num.sign)

    return num


def finalise(
    num: Number,
    config: DecimalConfig,
    precision: int | None = None,
    rounding: RoundingMode | None = None,
) -> Number:
    """
    Финальная обработка результата операции: округление + лимиты экспоненты.

    Args:
        num: Сырой (возможно слишком длинный) результат
        config: Снапшот конфигурации
        precision: Переопределение config.precision
        rounding: Переопределение config.rounding

    Returns:
        Number с не более чем precision значащими цифрами
    """
    if precision is None:
        precision = config.precision
    if rounding is None:
        rounding = config.rounding

    rounded, _ = round_number(num, precision, rounding)
    return apply_exponent_limits(rounded, config)
