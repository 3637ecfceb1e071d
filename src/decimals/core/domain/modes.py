"""
Modes — режимы округления и modulo

Два семейства режимов:
- RoundingMode: 9 дисциплин округления результата до precision
- ModuloMode: 5 дисциплин для a mod n (подмножество идентификаторов
  округления + euclid)

Wire form: числовые коды 0..9 в каноническом порядке
up, down, ceil, floor, half-up, half-down, half-even, half-ceil, half-floor, euclid.
"""

from enum import Enum
from typing import Any, Final


# =============================================================================
# WIRE CODES
# =============================================================================

MODE_CODES: Final[dict[str, int]] = {
    "round-up": 0,
    "round-down": 1,
    "round-ceil": 2,
    "round-floor": 3,
    "round-half-up": 4,
    "round-half-down": 5,
    "round-half-even": 6,
    "round-half-ceil": 7,
    "round-half-floor": 8,
    "euclid": 9,
}

EUCLID_CODE: Final[int] = MODE_CODES["euclid"]


def _resolve_name(value: Any) -> str | None:
    """Нормализация имени режима или wire code к каноническому имени."""
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        for name, code in MODE_CODES.items():
            if code == value:
                return name
        return None

    if isinstance(value, str):
        name = value.strip().lower().replace("_", "-")
        if name in MODE_CODES:
            return name
        if f"round-{name}" in MODE_CODES:
            return f"round-{name}"

    return None


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления результата операции до precision значащих цифр."""

    UP = "round-up"
    DOWN = "round-down"
    CEIL = "round-ceil"
    FLOOR = "round-floor"
    HALF_UP = "round-half-up"
    HALF_DOWN = "round-half-down"
    HALF_EVEN = "round-half-even"
    HALF_CEIL = "round-half-ceil"
    HALF_FLOOR = "round-half-floor"

    @property
    def code(self) -> int:
        return MODE_CODES[self.value]

    @classmethod
    def parse(cls, value: Any) -> "RoundingMode":
        """
        Разбор режима округления из enum, имени или wire code.

        Принимает "round-half-up", "half-up", "HALF_UP", 4 или RoundingMode.HALF_UP.

        Raises:
            ValueError: Если режим неизвестен или это euclid (только для modulo)
        """
        if isinstance(value, cls):
            return value

        name = _resolve_name(value)
        if name == "euclid":
            raise ValueError("euclid is a modulo mode, not a rounding mode")
        if name is None:
            raise ValueError(f"unknown rounding mode: {value!r}")

        return cls(name)


class ModuloMode(str, Enum):
    """
    Режим вычисления a mod n.

    | mode            | знак остатка                 |
    |-----------------|------------------------------|
    | UP              | противоположен делимому      |
    | DOWN            | как у делимого (truncation)  |
    | FLOOR           | как у делителя               |
    | HALF_EVEN       | IEEE 754 remainder           |
    | EUCLID          | всегда неотрицательный       |
    """

    UP = "round-up"
    DOWN = "round-down"
    FLOOR = "round-floor"
    HALF_EVEN = "round-half-even"
    EUCLID = "euclid"

    @property
    def code(self) -> int:
        return MODE_CODES[self.value]

    @classmethod
    def parse(cls, value: Any) -> "ModuloMode":
        """
        Разбор modulo режима из enum, имени или wire code.

        Raises:
            ValueError: Если режим не входит в семейство modulo
        """
        if isinstance(value, cls):
            return value

        name = _resolve_name(value)
        if name is None:
            raise ValueError(f"unknown modulo mode: {value!r}")

        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"{name} is not a modulo mode") from None

    @property
    def quotient_rounding(self) -> RoundingMode | None:
        """Режим округления частного (None для EUCLID)."""
        if self is ModuloMode.EUCLID:
            return None
        return RoundingMode(self.value)
