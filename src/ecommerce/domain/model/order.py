"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its order items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"


@dataclass(frozen=True)
class OrderItem:
    """Captures the price of a product at order-creation time.

    Never mutated after creation; the ``unit_price`` stays put even if the
    catalog price changes later (price lock).
    """

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: int
    items: list[OrderItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: int,
        items: list[OrderItem],
        order_date: datetime | None = None,
    ) -> Order:
        """Create a new PENDING order whose total is derived from its items."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        order = Order(
            id=None,
            customer_id=customer_id,
            items=list(items),
            total_amount=Money.zero(),
        )
        if order_date is not None:
            order.order_date = order_date
        order.total_amount = order.total
        return order

    # --- State transitions ----------------------------------------------------

    def mark_processed(self) -> None:
        """Transition PENDING -> PROCESSED."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot process order, current status is {self.status.value}, "
                f"expected PENDING"
            )
        self.status = OrderStatus.PROCESSED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        """Sum of line totals over the items currently held."""
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
