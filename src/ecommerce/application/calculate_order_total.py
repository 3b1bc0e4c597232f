"""Application service: Calculate Order Total use case (query).

Recomputes the total from the persisted order items rather than
trusting the stored header amount.  Lenient by contract: an unknown
order, or one without items, totals to zero instead of raising.
"""

from __future__ import annotations

from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.model.value_objects import Money


class CalculateOrderTotalHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> Money:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                return Money.zero()
            return order.total
