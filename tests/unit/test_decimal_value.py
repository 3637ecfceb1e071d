"""
Тесты для Decimal value

Проверяет:
1. Конструкцию через decimal(...) (закрытое множество входов)
2. Операторы и смешанные операнды (int, float)
3. Сравнения, NaN, hash
4. Конверсии float / int / bool / str / repr
5. Предикаты и свойства
"""

import pytest

from decimals import Decimal, Engine, InvalidNumber, Kind, decimal


@pytest.fixture
def engine() -> Engine:
    return Engine()


class TestConstruction:
    """decimal(...)"""

    def test_existing_value_returned_unchanged(self) -> None:
        value = decimal("1.5")
        assert decimal(value) is value

    def test_value_from_other_engine_returned_unchanged(self) -> None:
        value = Engine().config_derive({"precision": 3}).decimal("1.23456")
        assert decimal(value) is value
        assert str(decimal(value)) == "1.23456"

    @pytest.mark.parametrize("value", [True, None, "abc", "1,5", [1], object()])
    def test_invalid_inputs(self, value) -> None:
        with pytest.raises(InvalidNumber):
            decimal(value)

    def test_invalid_number_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decimal("12abc")

    def test_float_input(self) -> None:
        assert str(decimal(0.1)) == "0.1"
        assert str(decimal(-2.5e-10)) == "-2.5e-10"


class TestOperators:
    """Арифметические операторы"""

    def test_basic_operators(self) -> None:
        a, b = decimal("7.5"), decimal(2)
        assert str(a + b) == "9.5"
        assert str(a - b) == "5.5"
        assert str(a * b) == "15"
        assert str(a / b) == "3.75"
        assert str(a % b) == "1.5"
        assert str(b**3) == "8"

    def test_reflected_operators(self) -> None:
        value = decimal("0.5")
        assert str(1 + value) == "1.5"
        assert str(1 - value) == "0.5"
        assert str(3 * value) == "1.5"
        assert str(1 / value) == "2"
        assert str(7 % decimal(3)) == "1"
        assert str(2**value) == "1.4142135623730950488"

    def test_float_operand(self) -> None:
        assert str(decimal("0.2") + 0.1) == "0.3"

    def test_unary(self) -> None:
        value = decimal("-5")
        assert str(-value) == "5"
        assert str(abs(value)) == "5"
        assert +value is value

    def test_string_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            decimal(1) + "2"

    def test_bool_operand_rejected(self) -> None:
        with pytest.raises(TypeError):
            decimal(1) + True

    def test_result_bound_to_left_operand_engine(self) -> None:
        low = Engine().config_derive({"precision": 2})
        result = low.decimal(1) / decimal(3)
        assert result.engine is low
        assert str(result) == "0.33"


class TestComparison:
    """Сравнения и hash"""

    def test_numeric_equality(self) -> None:
        assert decimal("1.0") == decimal("1.00")
        assert decimal("1e2") == 100
        assert decimal("-0") == decimal("0")
        assert decimal("0.5") == 0.5

    def test_ordering(self) -> None:
        assert decimal(1) < 2
        assert decimal("1.5") > 1.4
        assert decimal("-Infinity") < decimal("-1e100")
        assert decimal(3) >= decimal("3.0")
        assert decimal(3) <= 3

    def test_nan_unequal_and_unordered(self) -> None:
        nan = decimal("NaN")
        assert nan != nan
        assert not nan == nan
        assert not nan < 1
        assert not nan >= 1
        assert not nan > decimal("-Infinity")

    def test_ordering_with_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            decimal(1) < "2"

    def test_not_equal_to_unsupported_type(self) -> None:
        assert decimal(1) != "1"

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(decimal("1.0")) == hash(decimal("1.00"))
        assert hash(decimal(5)) == hash(5)
        assert hash(decimal("-123")) == hash(-123)
        assert hash(decimal("0.5")) == hash(0.5)
        assert hash(decimal("-0")) == hash(0)
        assert hash(decimal("Infinity")) == hash(float("inf"))
        assert hash(decimal(-1)) == hash(-1)

    def test_float_compared_by_exact_binary_value(self) -> None:
        """0.1 как float не равен десятичному 0.1, hash согласован с этим"""
        d = decimal("0.1")
        assert d != 0.1
        assert d < 0.1
        assert decimal("0.1000000000000000055511151231257827021181583404541015625") == 0.1
        assert hash(decimal("0.1000000000000000055511151231257827021181583404541015625")) == hash(0.1)
        assert decimal("-2.5") == -2.5
        assert decimal("1.5") > 1.4

    def test_float_equality_implies_equal_hash(self) -> None:
        for text, number in [("0.1", 0.1), ("0.5", 0.5), ("1e-7", 1e-7), ("3", 3.0), ("-0", -0.0)]:
            d = decimal(text)
            if d == number:
                assert hash(d) == hash(number)

    def test_float_set_membership(self) -> None:
        assert len({decimal("0.1"), 0.1}) == 2
        assert len({decimal("0.25"), 0.25}) == 1

    def test_float_arithmetic_uses_shortest_repr(self) -> None:
        assert str(decimal("0.2") + 0.1) == "0.3"

    def test_usable_as_dict_key(self) -> None:
        table = {decimal("2.50"): "a"}
        assert table[decimal("2.5")] == "a"

    def test_compare_method(self) -> None:
        assert decimal(1).compare("2") == -1
        assert decimal("NaN").compare(1) is None


class TestConversions:
    """float / int / bool / str / repr"""

    def test_float(self) -> None:
        assert float(decimal("0.1")) == 0.1
        assert float(decimal("-1.5e300")) == -1.5e300
        assert float(decimal("1e400")) == float("inf")
        assert float(decimal("-Infinity")) == float("-inf")

    def test_int_truncates(self) -> None:
        assert int(decimal("-2.7")) == -2
        assert int(decimal("2.7")) == 2
        assert int(decimal("1.2e3")) == 1200
        assert int(decimal("0.9")) == 0

    def test_int_special_values(self) -> None:
        with pytest.raises(ValueError):
            int(decimal("NaN"))
        with pytest.raises(OverflowError):
            int(decimal("Infinity"))

    def test_bool(self) -> None:
        assert not decimal(0)
        assert not decimal("-0")
        assert decimal("0.001")
        assert decimal("NaN")

    def test_str_and_repr(self) -> None:
        value = decimal("1.50")
        assert str(value) == "1.5"
        assert repr(value) == "Decimal('1.5')"


class TestPredicatesAndProperties:
    """Предикаты и свойства"""

    def test_properties(self) -> None:
        value = decimal("-123.45")
        assert isinstance(value, Decimal)
        assert value.sign == -1
        assert value.digits == "12345"
        assert value.exponent == 2
        assert value.precision == 5
        assert value.kind is Kind.FINITE

    def test_predicates(self) -> None:
        assert decimal("-0").is_zero()
        assert decimal("-0").is_negative()
        assert decimal("Infinity").is_positive()
        assert not decimal("Infinity").is_finite()
        assert not decimal("NaN").is_positive()
        assert not decimal("NaN").is_negative()
        assert decimal("NaN").is_nan()
        assert decimal("1e3").is_integer()
        assert not decimal("1.5").is_integer()
        assert decimal(0).is_finite()

    def test_special_kinds(self) -> None:
        assert decimal("NaN").kind is Kind.NAN
        assert decimal("-Infinity").kind is Kind.INFINITY
        assert decimal(0).kind is Kind.ZERO
        assert decimal(0).precision == 0

    def test_transcendental_methods(self) -> None:
        assert str(decimal(1).exp()) == "2.7182818284590452354"
        assert str(decimal(1).ln()) == "0"
        assert str(decimal(2).pow(10)) == "1024"
