"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from ecommerce.domain.exceptions import InsufficientStockError, ValidationError
from ecommerce.domain.model.inventory import (
    NegativeStockRejected,
    StockAdjusted,
    StockChange,
)
from ecommerce.domain.model.value_objects import Money
from tests.fakes import make_product


class TestPricing:

    def test_update_price(self):
        laptop = make_product(1, "Laptop", "999.99", 50)
        laptop.update_price(Money.of("899.00"))
        assert laptop.price == Money.of("899.00")

    def test_zero_price_rejected(self):
        laptop = make_product(1, "Laptop", "999.99", 50)
        with pytest.raises(ValidationError, match="greater than zero"):
            laptop.update_price(Money.zero())
        assert laptop.price == Money.of("999.99")

    def test_price_after_does_not_mutate(self):
        mouse = make_product(2, "Mouse", "29.99", 100)
        assert mouse.price_after(Decimal("10")) == Money.of("32.99")
        assert mouse.price == Money.of("29.99")


class TestAdjustStock:

    def test_restock(self):
        laptop = make_product(1, "Laptop", "999.99", 50)
        result = laptop.adjust_stock(5)
        assert result == StockAdjusted(product_id=1, old_stock=50, new_stock=55)
        assert laptop.stock_quantity == 55

    def test_consume_down_to_zero(self):
        laptop = make_product(1, "Laptop", "999.99", 5)
        result = laptop.adjust_stock(-5)
        assert isinstance(result, StockAdjusted)
        assert laptop.stock_quantity == 0

    def test_negative_result_rejected_without_change(self):
        laptop = make_product(1, "Laptop", "999.99", 55)
        result = laptop.adjust_stock(-60)
        assert result == NegativeStockRejected(
            product_id=1, current_stock=55, attempted_change=-60
        )
        assert laptop.stock_quantity == 55


class TestRemoveStock:

    def test_returns_change(self):
        mouse = make_product(2, "Mouse", "29.99", 100)
        change = mouse.remove_stock(2)
        assert change == StockChange(product_id=2, old_stock=100, new_stock=98)
        assert change.delta == -2

    def test_more_than_available_rejected(self):
        mouse = make_product(2, "Mouse", "29.99", 1)
        with pytest.raises(InsufficientStockError, match="need 2, have 1"):
            mouse.remove_stock(2)
        assert mouse.stock_quantity == 1

    def test_non_positive_rejected(self):
        mouse = make_product(2, "Mouse", "29.99", 1)
        with pytest.raises(ValidationError, match="must be positive"):
            mouse.remove_stock(0)
