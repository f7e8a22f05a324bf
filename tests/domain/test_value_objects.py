"""Unit tests for domain value objects and rounding helpers."""

from decimal import Decimal

import pytest

from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.value_objects import (
    Money,
    Quantity,
    is_number,
    round_money,
    round_whole,
    to_decimal,
)


# ── Rounding ─────────────────────────────────────────────────────────────────


class TestRounding:

    def test_round_money_half_up(self):
        assert round_money(Decimal("10.005")) == Decimal("10.01")
        assert round_money(Decimal("10.004")) == Decimal("10.00")

    def test_round_money_negative_half_away_from_zero(self):
        assert round_money(Decimal("-2.345")) == Decimal("-2.35")

    def test_round_whole_half_up(self):
        assert round_whole(Decimal("40.5")) == Decimal("41")
        assert round_whole(Decimal("40.49")) == Decimal("40")

    def test_to_decimal_avoids_float_noise(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid numeric value"):
            to_decimal("twelve")

    @pytest.mark.parametrize("value", ["NaN", "nan", float("nan"), "Infinity", Decimal("-inf")])
    def test_to_decimal_rejects_non_finite(self, value):
        with pytest.raises(ValidationError, match="Invalid numeric value"):
            to_decimal(value)


class TestIsNumber:

    @pytest.mark.parametrize("value", [0, 150, 2.5, Decimal("3.25")])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize(
        "value",
        [True, False, "150", None, float("nan"), float("inf"), Decimal("NaN"), [1]],
    )
    def test_non_numbers(self, value):
        assert not is_number(value)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_defaults_to_nis(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "NIS"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported currency"):
            Money(Decimal("1"), "GBP")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * True

    def test_scaled_rounds_to_cents(self):
        assert Money.of("99.99").scaled(Decimal("0.17")) == Money.of("17.00")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "₪15.00"
        assert str(Money.of("9.5", "USD")) == "$9.50"
        assert str(Money.of("3", "EUR")) == "€3.00"

    def test_of_rejects_nan(self):
        with pytest.raises(ValidationError, match="Invalid numeric value"):
            Money.of("NaN")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)
