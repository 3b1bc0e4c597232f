"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ecommerce.application.dto import OrderDTO, OrderItemDTO
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import OrderNotFoundError
from ecommerce.domain.model.order import Order

DATE_FORMAT = "%Y-%m-%d %H:%M"


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total_amount),
            order_date=order.order_date.strftime(DATE_FORMAT),
        )
