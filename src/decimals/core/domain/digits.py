"""
Digits — преобразования между строкой цифр и целым числом

Интерпретатор ограничивает int <-> str конверсию (int_max_str_digits, 4300 цифр
по умолчанию). Precision может достигать 1e9, поэтому длинные значения
конвертируются по частям, без изменения глобальной настройки.
"""

from typing import Final

# Размер части, гарантированно ниже лимита интерпретатора
CHUNK_DIGITS: Final[int] = 4000

_CHUNK_POWER: Final[int] = 10**CHUNK_DIGITS

LOG10_2: Final[float] = 0.30102999566398120


def digits_to_int(digits: str) -> int:
    """
    Строка десятичных цифр → неотрицательное целое.

    Examples:
        >>> digits_to_int("1024")
        1024
        >>> digits_to_int("")
        0
    """
    if not digits:
        return 0

    if len(digits) <= CHUNK_DIGITS:
        return int(digits)

    # Разбиение пополам: O(n log n) умножений вместо квадратичного прохода
    half = len(digits) // 2
    high = digits_to_int(digits[:-half])
    low = digits_to_int(digits[-half:])
    return high * 10**half + low


def int_to_digits(n: int) -> str:
    """
    Неотрицательное целое → строка десятичных цифр.

    Examples:
        >>> int_to_digits(1024)
        '1024'
        >>> int_to_digits(0)
        '0'
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if n < _CHUNK_POWER:
        return str(n)

    half = digit_count(n) // 2
    high, low = divmod(n, 10**half)
    return int_to_digits(high) + int_to_digits(low).rjust(half, "0")


def digit_count(n: int) -> int:
    """
    Количество десятичных цифр в |n| (0 для n == 0).

    Оценка через bit_length с коррекцией, без str().
    """
    n = abs(n)
    if n == 0:
        return 0

    # Оценка по log10(2) точна до единицы, коррекция в обе стороны
    estimate = int((n.bit_length() - 1) * LOG10_2) + 1
    while n >= 10**estimate:
        estimate += 1
    while estimate > 1 and n < 10 ** (estimate - 1):
        estimate -= 1
    return estimate

