"""
Тесты для Arithmetic Operations

Проверяет:
1. Точное сложение/вычитание/умножение в пределах precision
2. Корректное округление деления
3. Sticky-замену пренебрежимо малого слагаемого
4. IEEE-подобные special cases (NaN, Infinity, знак нуля)
5. DivisionByZero для конечного ненулевого делимого
6. Сравнение (-1 / 0 / 1 / None)
"""

import pytest

from decimals import DivisionByZero, Engine


@pytest.fixture
def engine() -> Engine:
    """Engine с конфигурацией по умолчанию (precision 20, half-up)."""
    return Engine()


@pytest.fixture
def engine5() -> Engine:
    """Engine с precision 5."""
    return Engine().config_derive({"precision": 5})


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


class TestAddition:
    """Сложение и вычитание"""

    def test_exact_decimal_sum(self, engine: Engine) -> None:
        """0.1 + 0.2 == 0.3 без binary floating-point ошибки"""
        assert str(engine.add("0.1", "0.2")) == "0.3"

    def test_alignment_of_exponents(self, engine: Engine) -> None:
        """Слагаемые с разными экспонентами"""
        assert str(engine.add("1234.5", "0.00067")) == "1234.50067"

    def test_result_rounded_to_precision(self) -> None:
        """1234 + 1 при precision 3 → 1240 (half-up)"""
        engine = Engine().config_derive({"precision": 3})
        assert str(engine.add("1234", "1")) == "1240"

    def test_negligible_addend_rounds_up(self) -> None:
        """1e10 + 1e-20 при precision 5 и round-up → 10001000000"""
        engine = Engine().config_derive({"precision": 5, "rounding": "up"})
        assert str(engine.add("1e10", "1e-20")) == "10001000000"

    def test_negligible_addend_rounds_down(self, engine5: Engine) -> None:
        """1e10 + 1e-20 при half-up → 1e10"""
        assert str(engine5.add("1e10", "1e-20")) == "10000000000"

    def test_negligible_negative_addend_floor(self) -> None:
        """1e10 - 1e-20 при round-floor → 9.9999e9"""
        engine = Engine().config_derive({"precision": 5, "rounding": "floor"})
        assert str(engine.add("1e10", "-1e-20")) == "9999900000"

    def test_subtract(self, engine: Engine) -> None:
        """5.5 - 7.25 = -1.75"""
        assert str(engine.subtract("5.5", "7.25")) == "-1.75"

    def test_self_subtraction_is_positive_zero(self, engine: Engine) -> None:
        """x - x = +0"""
        result = engine.subtract("-3.5", "-3.5")
        assert result.is_zero()
        assert result.sign == 1

    def test_negative_zeros_sum(self, engine: Engine) -> None:
        """-0 + -0 = -0"""
        result = engine.add("-0", "-0")
        assert result.is_zero()
        assert result.is_negative()

    def test_infinity_minus_infinity_is_nan(self, engine: Engine) -> None:
        """Infinity - Infinity = NaN"""
        assert engine.subtract("Infinity", "Infinity").is_nan()

    def test_infinity_plus_finite(self, engine: Engine) -> None:
        """-Infinity + 5 = -Infinity"""
        assert str(engine.add("-Infinity", 5)) == "-Infinity"

    def test_nan_propagates(self, engine: Engine) -> None:
        assert engine.add("NaN", 1).is_nan()


# =============================================================================
# MULTIPLICATION
# =============================================================================


class TestMultiplication:
    """Умножение"""

    def test_exact_product(self, engine: Engine) -> None:
        assert str(engine.multiply("1.5", "-2")) == "-3"

    def test_product_rounded(self, engine5: Engine) -> None:
        """123.45 * 1.1 = 135.795 → 135.80 (5 цифр, half-up)"""
        assert str(engine5.multiply("123.45", "1.1")) == "135.8"

    def test_infinity_times_zero_is_nan(self, engine: Engine) -> None:
        assert engine.multiply("Infinity", 0).is_nan()

    def test_zero_sign(self, engine: Engine) -> None:
        """-2 * 0 = -0"""
        result = engine.multiply(-2, 0)
        assert result.is_zero()
        assert result.is_negative()


# =============================================================================
# DIVISION
# =============================================================================


class TestDivision:
    """Деление"""

    def test_one_third(self, engine5: Engine) -> None:
        assert str(engine5.divide(1, 3)) == "0.33333"

    def test_two_thirds_rounds_up(self, engine5: Engine) -> None:
        assert str(engine5.divide(2, 3)) == "0.66667"

    def test_exact_quotient(self, engine: Engine) -> None:
        assert str(engine.divide("1", "8")) == "0.125"

    def test_tie_uses_sticky_digit(self) -> None:
        """1.000001 / 4 при precision 1: чуть больше 0.25 → 0.3 даже при half-down"""
        engine = Engine().config_derive({"precision": 1, "rounding": "half-down"})
        assert str(engine.divide("1.000001", "4")) == "0.3"

    def test_exact_tie_half_down(self) -> None:
        """1 / 4 при precision 1 и half-down: точный tie → 0.2"""
        engine = Engine().config_derive({"precision": 1, "rounding": "half-down"})
        assert str(engine.divide("1", "4")) == "0.2"

    def test_division_by_zero_raises(self, engine: Engine) -> None:
        """Конечное ненулевое / 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            engine.divide(1, 0)

    def test_division_by_zero_is_zero_division_error(self, engine: Engine) -> None:
        with pytest.raises(ZeroDivisionError):
            engine.decimal(-1) / 0

    def test_zero_over_zero_is_nan(self, engine: Engine) -> None:
        assert engine.divide(0, 0).is_nan()

    def test_infinity_over_infinity_is_nan(self, engine: Engine) -> None:
        assert engine.divide("Infinity", "-Infinity").is_nan()

    def test_finite_over_infinity_is_zero(self, engine: Engine) -> None:
        result = engine.divide(-1, "Infinity")
        assert result.is_zero()
        assert result.is_negative()

    def test_infinity_over_finite(self, engine: Engine) -> None:
        assert str(engine.divide("Infinity", -2)) == "-Infinity"


# =============================================================================
# UNARY AND COMPARISON
# =============================================================================


class TestUnary:
    """negate / absolute"""

    def test_negate(self, engine: Engine) -> None:
        assert str(engine.negate("5")) == "-5"

    def test_absolute(self, engine: Engine) -> None:
        assert str(engine.absolute("-5.25")) == "5.25"

    def test_negate_rounds(self, engine5: Engine) -> None:
        """Унарные операции тоже округляют до precision"""
        assert str(engine5.negate("1.234567")) == "-1.2346"


class TestCompare:
    """compare → -1 / 0 / 1 / None"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 2, -1),
            ("2", "1.999", 1),
            ("1.0", "1.00", 0),
            ("-0", "0", 0),
            ("-1e100", "-Infinity", 1),
            ("Infinity", "Infinity", 0),
            ("-5", "3", -1),
            ("-5", "-3", -1),
            ("0", "-0.001", 1),
        ],
    )
    def test_compare(self, engine: Engine, a, b, expected) -> None:
        assert engine.compare(a, b) == expected

    def test_nan_is_unordered(self, engine: Engine) -> None:
        assert engine.compare("NaN", 1) is None
        assert engine.compare(1, "NaN") is None
