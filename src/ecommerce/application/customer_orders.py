"""Application service: Customer Orders use case (query)."""

from __future__ import annotations

from ecommerce.application.dto import OrderSummaryDTO
from ecommerce.application.show_order import DATE_FORMAT
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import CustomerNotFoundError


class CustomerOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, customer_id: int) -> list[OrderSummaryDTO]:
        """Return the customer's orders, newest first."""
        with self._uow as uow:
            if uow.customers.get_by_id(customer_id) is None:
                raise CustomerNotFoundError(customer_id)
            orders = uow.orders.list_by_customer(customer_id)

        return [
            OrderSummaryDTO(
                id=order.id,
                order_date=order.order_date.strftime(DATE_FORMAT),
                total=str(order.total_amount),
                status=order.status.value,
            )
            for order in orders
        ]
