"""
Тесты для domain моделей

Проверяет:
1. RoundingMode / ModuloMode: разбор имён и wire codes
2. Number: нормализация, свойства, конструкторы
3. Digits: конверсия длинных значений без лимита int -> str
"""

import pytest

from decimals.core.domain.digits import digit_count, digits_to_int, int_to_digits
from decimals.core.domain.modes import MODE_CODES, ModuloMode, RoundingMode
from decimals.core.domain.number import (
    NAN,
    Kind,
    Number,
    from_coefficient,
    from_digits,
    infinity,
    zero,
)


# =============================================================================
# MODES
# =============================================================================


class TestRoundingMode:
    """RoundingMode"""

    def test_codes_in_canonical_order(self) -> None:
        assert [mode.code for mode in RoundingMode] == list(range(9))
        assert MODE_CODES["euclid"] == 9

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("round-up", RoundingMode.UP),
            ("down", RoundingMode.DOWN),
            ("CEIL", RoundingMode.CEIL),
            ("round_floor", RoundingMode.FLOOR),
            (4, RoundingMode.HALF_UP),
            ("half_down", RoundingMode.HALF_DOWN),
            (6, RoundingMode.HALF_EVEN),
            ("half-ceil", RoundingMode.HALF_CEIL),
            (RoundingMode.HALF_FLOOR, RoundingMode.HALF_FLOOR),
        ],
    )
    def test_parse(self, value, expected) -> None:
        assert RoundingMode.parse(value) is expected

    @pytest.mark.parametrize("value", ["euclid", 9, 10, -1, True, None, "sideways", 4.0])
    def test_parse_rejects(self, value) -> None:
        with pytest.raises(ValueError):
            RoundingMode.parse(value)


class TestModuloMode:
    """ModuloMode"""

    def test_codes(self) -> None:
        assert [mode.code for mode in ModuloMode] == [0, 1, 3, 6, 9]

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, ModuloMode.UP),
            ("down", ModuloMode.DOWN),
            (3, ModuloMode.FLOOR),
            ("round-half-even", ModuloMode.HALF_EVEN),
            ("EUCLID", ModuloMode.EUCLID),
        ],
    )
    def test_parse(self, value, expected) -> None:
        assert ModuloMode.parse(value) is expected

    @pytest.mark.parametrize("value", [2, 4, 5, 7, 8, "ceil", "half-up"])
    def test_non_modulo_modes_rejected(self, value) -> None:
        with pytest.raises(ValueError, match="not a modulo mode"):
            ModuloMode.parse(value)

    def test_quotient_rounding(self) -> None:
        assert ModuloMode.FLOOR.quotient_rounding is RoundingMode.FLOOR
        assert ModuloMode.EUCLID.quotient_rounding is None


# =============================================================================
# NUMBER
# =============================================================================


class TestNumber:
    """Number"""

    def test_from_digits_normalises(self) -> None:
        assert from_digits(1, "00120", 4) == Number(1, "12", 2, Kind.FINITE)

    def test_from_digits_zero(self) -> None:
        assert from_digits(-1, "000", 5) == zero(-1)

    def test_from_coefficient(self) -> None:
        value = from_coefficient(-1, 15000, -3)
        assert value == Number(-1, "15", 1, Kind.FINITE)
        assert value.coefficient == 15
        assert value.scale == 0

    def test_properties(self) -> None:
        value = from_digits(1, "12345", 2)
        assert value.is_finite
        assert not value.is_integer
        assert value.scale == -2
        assert from_digits(1, "12", 5).is_integer
        assert zero().is_integer
        assert not infinity().is_finite
        assert not NAN.is_integer

    def test_sign_helpers(self) -> None:
        value = from_digits(1, "5", 0)
        assert value.negated().sign == -1
        assert value.with_sign(-1).negative
        assert NAN.negated() is NAN


# =============================================================================
# DIGITS
# =============================================================================


class TestDigits:
    """Конверсия длинных значений"""

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 0), (9, 1), (10, 2), (-999, 3), (10**5000 - 1, 5000), (10**5000, 5001)],
        ids=["0", "9", "10", "-999", "1e5000-1", "1e5000"],
    )
    def test_digit_count(self, n: int, expected: int) -> None:
        assert digit_count(n) == expected

    def test_long_round_trip(self) -> None:
        digits = "9" * 9000
        value = digits_to_int(digits)
        assert value == 10**9000 - 1
        assert int_to_digits(value) == digits

    def test_long_power_of_ten(self) -> None:
        text = int_to_digits(10**12345)
        assert len(text) == 12346
        assert text == "1" + "0" * 12345

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            int_to_digits(-1)
