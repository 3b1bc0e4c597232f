"""Application service: Show Product use case (query).

Strict by contract: an unknown product raises ProductNotFoundError
rather than returning an empty record.
"""

from __future__ import annotations

from ecommerce.application.dto import ProductDTO
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import ProductNotFoundError


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductDTO:
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock=product.stock_quantity,
            category=product.category,
        )
