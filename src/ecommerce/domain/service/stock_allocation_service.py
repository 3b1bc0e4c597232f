"""Domain service: Stock Allocation.

Coordinates the cross-aggregate operation of taking stock out of the
catalog for every item of a new order.  It lives in the domain layer
because "all lines or none" is a core business rule, not just
orchestration.

The two-phase approach (validate-then-mutate) ensures we never leave
the catalog partially decremented if one line fails validation.
"""

from __future__ import annotations

from collections.abc import Mapping

from ecommerce.domain.exceptions import InsufficientStockError, ProductNotFoundError
from ecommerce.domain.model.inventory import StockChange
from ecommerce.domain.model.order import Order
from ecommerce.domain.model.product import Product


class StockAllocationService:

    def allocate(self, order: Order, products: Mapping[int, Product]) -> list[StockChange]:
        """Deduct stock for every item in the order.

        Uses a two-phase approach:
          Phase 1, validate: walk the items in order against the loaded
                    stock.  Items naming the same product are independent
                    lines but draw from the same running balance.
          Phase 2, mutate: one ``remove_stock()`` per product for the
                    summed quantity, so each product yields a single
                    StockChange.
        """
        # Phase 1: validate every line before touching anything
        remaining: dict[int, int] = {}
        needed: dict[int, int] = {}

        for item in order.items:
            product = products.get(item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)
            available = remaining.get(product.id, product.stock_quantity)
            qty = item.quantity.value
            if qty > available:
                raise InsufficientStockError(product.id, qty, available)
            remaining[product.id] = available - qty
            needed[product.id] = needed.get(product.id, 0) + qty

        # Phase 2: mutate
        return [products[pid].remove_stock(qty) for pid, qty in needed.items()]
