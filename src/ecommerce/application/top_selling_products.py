"""Application service: Top Selling Products use case (query)."""

from __future__ import annotations

from ecommerce.application.dto import TopSellerDTO
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import InvalidRequestError

DEFAULT_LIMIT = 5


class TopSellingProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, limit: int = DEFAULT_LIMIT) -> list[TopSellerDTO]:
        """Products ranked by units sold over all orders, best first."""
        if limit <= 0:
            raise InvalidRequestError("Limit must be positive")

        with self._uow as uow:
            ranking = uow.orders.units_sold_by_product(limit)
            products = uow.products.get_many([pid for pid, _ in ranking])

        return [
            TopSellerDTO(
                product_id=pid,
                name=products[pid].name,
                price=str(products[pid].price),
                units_sold=units,
            )
            for pid, units in ranking
            if pid in products
        ]
