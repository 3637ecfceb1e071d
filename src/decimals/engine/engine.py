"""
Engine — handle конфигурации decimal engine

Engine хранит ссылку на immutable DecimalConfig и создаёт привязанные к себе
Decimal значения. Каждая операция читает конфигурацию один раз (снапшот) и
передаёт её в core.math явно.

- config_set(options): валидация + атомарная замена конфигурации
- config_derive(options): новый независимый Engine с merged конфигурацией

Валидация options двухслойная:
1. JSON Schema контракт (core.contracts, config.json)
2. pydantic модель DecimalConfig

Любая ошибка валидации → InvalidConfig(field, value), конфигурация не меняется.
Engine не использует блокировки: конкурентные config_set сериализует вызывающий.
"""

import logging
import random as _random
import secrets
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from decimals.core.contracts import validate_config_options
from decimals.core.domain.config import MAX_PRECISION, DecimalConfig
from decimals.core.domain.modes import RoundingMode
from decimals.core.domain.number import Number, from_coefficient
from decimals.core.domain.value import Decimal
from decimals.core.errors import InvalidConfig
from decimals.core.math.arithmetic import (
    absolute,
    add,
    compare,
    divide,
    multiply,
    negate,
    subtract,
)
from decimals.core.math.modulo import modulo
from decimals.core.math.power import power
from decimals.core.math.rounding import apply_exponent_limits, round_number, round_to_places
from decimals.core.math.transcendental import exp, ln, sqrt
from decimals.core.text.formatting import to_fixed, to_string
from decimals.core.text.parsing import parse_numeral

logger = logging.getLogger(__name__)


def _translate_validation_error(error: ValidationError, options: Mapping[str, Any]) -> InvalidConfig:
    """pydantic ValidationError → InvalidConfig для первого невалидного поля."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else "options"
    value = options.get(field, first.get("input"))
    return InvalidConfig(field, value, first["msg"])


def _check_count(name: str, value: Any, minimum: int) -> int:
    """Проверка целочисленного аргумента operations (decimal places, sd)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not minimum <= value <= MAX_PRECISION:
        raise ValueError(f"{name} must be in [{minimum}, {MAX_PRECISION}], got {value}")
    return value


class Engine:
    """
    Configuration registry + фабрика Decimal значений.

    Examples:
        >>> engine = Engine().config_derive({"precision": 5})
        >>> str(engine.divide(1, 3))
        '0.33333'
    """

    def __init__(self, config: DecimalConfig | None = None):
        self._config = config if config is not None else DecimalConfig()

    def __repr__(self) -> str:
        return (
            f"Engine(precision={self._config.precision}, "
            f"rounding={self._config.rounding.value!r}, modulo={self._config.modulo.value!r})"
        )

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    @property
    def config(self) -> DecimalConfig:
        """Текущий снапшот конфигурации"""
        return self._config

    def _validated(self, options: Mapping[str, Any]) -> DecimalConfig:
        """
        Новая конфигурация = текущая + options.

        Raises:
            InvalidConfig: Если options нарушают контракт или домен поля
        """
        try:
            validate_config_options(options)
            try:
                return DecimalConfig(**self._config.merged(options))
            except ValidationError as e:
                raise _translate_validation_error(e, options) from e
        except InvalidConfig as e:
            logger.warning("Rejected decimal config %s=%r: %s", e.field, e.value, e.reason)
            raise

    def config_set(self, options: Mapping[str, Any]) -> None:
        """
        Атомарная замена конфигурации.

        Omitted поля сохраняют значение, неизвестные ключи игнорируются.

        Raises:
            InvalidConfig: Конфигурация при этом не меняется
        """
        config = self._validated(options)
        self._config = config
        logger.debug("Decimal config replaced: %s", config)

    def config_derive(self, options: Mapping[str, Any] | None = None) -> "Engine":
        """
        Новый независимый Engine с merged конфигурацией.

        Raises:
            InvalidConfig: Исходный Engine не меняется в любом случае
        """
        config = self._validated(options if options is not None else {})
        logger.debug("Decimal engine derived: %s", config)
        return Engine(config)

    def _rounding(self, rounding: Any) -> RoundingMode | None:
        if rounding is None:
            return None
        try:
            return RoundingMode.parse(rounding)
        except ValueError as e:
            raise InvalidConfig("rounding", rounding, str(e)) from e

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    def decimal(self, value: Any) -> Decimal:
        """
        Decimal из numeral text, int, float или существующего Decimal.

        Существующий Decimal возвращается без изменений (без округления).

        Raises:
            InvalidNumber: Если value не входит в множество допустимых входов
        """
        if isinstance(value, Decimal):
            return value
        return Decimal(parse_numeral(value, self._config), self)

    @staticmethod
    def is_decimal(value: Any) -> bool:
        """Является ли value Decimal (любого Engine)"""
        return isinstance(value, Decimal)

    def _number(self, value: Any, config: DecimalConfig) -> Number:
        if isinstance(value, Decimal):
            return value.number
        return parse_numeral(value, config)

    def _wrap(self, number: Number) -> Decimal:
        return Decimal(number, self)

    def random(self, significant_digits: int | None = None) -> Decimal:
        """
        Случайное значение в [0, 1) с не более чем significant_digits цифрами.

        secure_random=True: источник secrets, иначе random.
        """
        config = self._config
        sd = config.precision if significant_digits is None else _check_count(
            "significant_digits", significant_digits, 1
        )

        if config.secure_random:
            draw = secrets.randbelow(10**sd)
        else:
            draw = _random.randrange(10**sd)

        return self._wrap(apply_exponent_limits(from_coefficient(1, draw, -sd), config))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, a: Any, b: Any) -> Decimal:
        config = self._config
        return self._wrap(add(self._number(a, config), self._number(b, config), config))

    def subtract(self, a: Any, b: Any) -> Decimal:
        config = self._config
        return self._wrap(subtract(self._number(a, config), self._number(b, config), config))

    def multiply(self, a: Any, b: Any) -> Decimal:
        config = self._config
        return self._wrap(multiply(self._number(a, config), self._number(b, config), config))

    def divide(self, a: Any, b: Any) -> Decimal:
        """
        Raises:
            DivisionByZero: Конечное ненулевое a делится на ноль
        """
        config = self._config
        return self._wrap(divide(self._number(a, config), self._number(b, config), config))

    def modulo(self, a: Any, b: Any) -> Decimal:
        """a mod b по config.modulo; b == 0 → NaN"""
        config = self._config
        result = modulo(self._number(a, config), self._number(b, config), config.modulo, config)
        return self._wrap(result)

    def negate(self, a: Any) -> Decimal:
        config = self._config
        return self._wrap(negate(self._number(a, config), config))

    def absolute(self, a: Any) -> Decimal:
        config = self._config
        return self._wrap(absolute(self._number(a, config), config))

    def compare(self, a: Any, b: Any) -> int | None:
        """-1, 0, 1 или None (NaN операнд)"""
        config = self._config
        return compare(self._number(a, config), self._number(b, config))

    def pow(self, base: Any, exponent: Any) -> Decimal:
        """base ** exponent, округлённое до config.precision"""
        config = self._config
        return self._wrap(power(self._number(base, config), self._number(exponent, config), config))

    def sqrt(self, a: Any) -> Decimal:
        config = self._config
        return self._wrap(sqrt(self._number(a, config), config))

    def exp(self, a: Any) -> Decimal:
        config = self._config
        return self._wrap(exp(self._number(a, config), config))

    def ln(self, a: Any) -> Decimal:
        config = self._config
        return self._wrap(ln(self._number(a, config), config))

    # =========================================================================
    # ROUNDING
    # =========================================================================

    def to_decimal_places(self, a: Any, places: int, rounding: Any = None) -> Decimal:
        """
        Округление до places знаков после точки.

        Examples:
            >>> str(Engine().to_decimal_places("2.5", 0, "half-even"))
            '2'
        """
        config = self._config
        places = _check_count("places", places, 0)
        mode = self._rounding(rounding) or config.rounding
        rounded = round_to_places(self._number(a, config), places, mode)
        return self._wrap(apply_exponent_limits(rounded, config))

    def to_significant_digits(self, a: Any, significant_digits: int, rounding: Any = None) -> Decimal:
        """Округление до significant_digits значащих цифр."""
        config = self._config
        sd = _check_count("significant_digits", significant_digits, 1)
        mode = self._rounding(rounding) or config.rounding
        rounded, _ = round_number(self._number(a, config), sd, mode)
        return self._wrap(apply_exponent_limits(rounded, config))

    # =========================================================================
    # FORMATTING
    # =========================================================================

    def to_string(self, a: Any) -> str:
        """Каноническая текстовая форма по порогам нотации текущей конфигурации"""
        config = self._config
        return to_string(self._number(a, config), config)

    def to_fixed(self, a: Any, places: int | None = None, rounding: Any = None) -> str:
        """Plain запись с ровно places знаками после точки"""
        config = self._config
        if places is not None:
            places = _check_count("places", places, 0)
        return to_fixed(self._number(a, config), places, config, self._rounding(rounding))
