"""
Errors — исключения decimal engine

Три вида ошибок:
- InvalidConfig: поле конфигурации вне допустимого домена
- InvalidNumber: входное значение не является base-10 numeral
- DivisionByZero: деление конечного ненулевого числа на ноль

Численные граничные случаи (NaN/Infinity операнды, 0/0, modulo на ноль)
ошибками НЕ являются и разрешаются в NaN/Infinity.
"""

from typing import Any


class DecimalError(Exception):
    """Базовый класс для всех ошибок decimal engine."""

    pass


class InvalidConfig(DecimalError, ValueError):
    """
    Поле конфигурации вне допустимого домена.

    Attributes:
        field: Имя поля конфигурации
        value: Отклонённое значение
    """

    def __init__(self, field: str, value: Any, reason: str = "out of range"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config {field}={value!r}: {reason}")


class InvalidNumber(DecimalError, ValueError):
    """
    Значение нельзя интерпретировать как base-10 numeral.

    Attributes:
        value: Исходное значение
    """

    def __init__(self, value: Any, reason: str = "not a base-10 numeral"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid number {value!r}: {reason}")


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Деление конечного ненулевого делимого на ноль."""

    pass
