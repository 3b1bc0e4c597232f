"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change in bulk, stock goes up on restock and down on orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ecommerce.domain.exceptions import InsufficientStockError, ValidationError
from ecommerce.domain.model.inventory import (
    NegativeStockRejected,
    StockAdjusted,
    StockAdjustmentResult,
    StockChange,
)
from ecommerce.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is always greater than zero
    - ``stock_quantity`` never drops below zero
    """

    id: int
    name: str
    price: Money
    stock_quantity: int
    category: str
    description: str = ""

    # --- Pricing --------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order items
        capture a price snapshot at creation time.
        """
        if new_price.amount <= 0:
            raise ValidationError(
                f"Product price must be greater than zero ({self.name} -> {new_price})"
            )
        self.price = new_price

    def price_after(self, percent: Decimal) -> Money:
        """Price this product would have after a ``percent`` change."""
        return self.price.scaled(percent)

    # --- Stock ----------------------------------------------------------------

    def adjust_stock(self, delta: int) -> StockAdjustmentResult:
        """Apply a signed stock delta unless it would go negative.

        The rejected branch leaves the product untouched.
        """
        new_stock = self.stock_quantity + delta
        if new_stock < 0:
            return NegativeStockRejected(
                product_id=self.id,
                current_stock=self.stock_quantity,
                attempted_change=delta,
            )
        old_stock = self.stock_quantity
        self.stock_quantity = new_stock
        return StockAdjusted(product_id=self.id, old_stock=old_stock, new_stock=new_stock)

    def remove_stock(self, quantity: int) -> StockChange:
        """Deduct ordered units. Raises InsufficientStockError if short."""
        if quantity <= 0:
            raise ValidationError("Removed quantity must be positive")
        if quantity > self.stock_quantity:
            raise InsufficientStockError(self.id, quantity, self.stock_quantity)
        old_stock = self.stock_quantity
        self.stock_quantity -= quantity
        return StockChange(self.id, old_stock, self.stock_quantity)
