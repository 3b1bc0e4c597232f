"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup, stock allocation, Order creation and the audit trail) and it
does so inside a single unit of work: either the order, its items, the
stock decrements and the log entries all commit, or none of them do.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from ecommerce.application.dto import OrderLineSpec
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import (
    CustomerNotFoundError,
    EntityNotFoundError,
    InvalidRequestError,
    ProductNotFoundError,
    ValidationError,
)
from ecommerce.domain.model.inventory import InventoryLogEntry, order_reason
from ecommerce.domain.model.order import Order, OrderItem
from ecommerce.domain.model.value_objects import Quantity
from ecommerce.domain.service.stock_allocation_service import StockAllocationService
from ecommerce.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow = uow
        self._clock = clock

    def handle(self, customer_id: int, lines: Sequence[OrderLineSpec] | None) -> int:
        """Create a PENDING order and return its ID.

        Steps:
        1. Reject malformed requests before opening a transaction.
        2. Lock every referenced product in one batched read.
        3. Build OrderItems with the *loaded* prices (snapshot).
        4. Validate and deduct stock for all lines (domain service).
        5. Persist order, stock and one log entry per product; commit.
        """
        self._check_request(lines)

        try:
            with self._uow as uow:
                if uow.customers.get_by_id(customer_id) is None:
                    raise CustomerNotFoundError(customer_id)

                product_ids = sorted({line.product_id for line in lines})
                products = uow.products.get_many(product_ids, for_update=True)

                items: list[OrderItem] = []
                for line in lines:
                    product = products.get(line.product_id)
                    if product is None:
                        raise ProductNotFoundError(line.product_id)
                    items.append(
                        OrderItem(
                            product_id=product.id,
                            quantity=Quantity(line.quantity),
                            unit_price=product.price,  # <-- price snapshot
                        )
                    )

                now = self._clock()
                order = Order.create(customer_id=customer_id, items=items, order_date=now)
                changes = StockAllocationService().allocate(order, products)

                order_id = uow.orders.add(order)
                reason = order_reason(order_id)
                for change in changes:
                    uow.products.save(products[change.product_id])
                    uow.inventory_log.append(InventoryLogEntry.record(change, reason, now))

                uow.commit()
        except (ValidationError, EntityNotFoundError) as exc:
            logger.warning("Order for customer %s rejected: %s", customer_id, exc)
            raise

        logger.info(
            "Order %s created for customer %s with %d item(s), total %s",
            order_id,
            customer_id,
            len(order.items),
            order.total_amount,
        )
        return order_id

    @staticmethod
    def _check_request(lines: Sequence[OrderLineSpec] | None) -> None:
        if not lines:
            raise InvalidRequestError("Order must contain at least one line")
        for line in lines:
            qty = line.quantity
            if not isinstance(qty, int) or isinstance(qty, bool) or qty <= 0:
                raise InvalidRequestError(
                    f"Quantity for product ID {line.product_id} must be a positive "
                    f"integer, got {qty!r}"
                )
