"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("29.99") * 2
        assert result == Money.of("59.98")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1.00") * 1.5

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestMoneyScaled:

    @pytest.mark.parametrize(
        "price, percent, expected",
        [
            ("999.99", "10", "1099.99"),
            ("29.99", "10", "32.99"),
            ("79.99", "10", "87.99"),
            ("10.00", "-25", "7.50"),
            ("0.05", "50", "0.08"),  # 0.075 rounds half up
            ("100.00", "0", "100.00"),
        ],
    )
    def test_rounds_half_up_to_cents(self, price, percent, expected):
        assert Money.of(price).scaled(Decimal(percent)).amount == Decimal(expected)

    def test_large_cut_can_round_to_zero(self):
        assert Money.of("0.01").scaled(Decimal("-99")) == Money.zero()


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
