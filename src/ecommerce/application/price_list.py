"""Application service: Price List use case (query).

Yields entries one at a time while the underlying cursor is open, so
the caller must consume (or close) the iterator to end the read.
"""

from __future__ import annotations

from collections.abc import Iterator

from ecommerce.application.dto import PriceListEntryDTO
from ecommerce.application.unit_of_work import UnitOfWork


class PriceListHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> Iterator[PriceListEntryDTO]:
        with self._uow as uow:
            for product in uow.products.iter_price_list():
                yield PriceListEntryDTO(
                    product_id=product.id,
                    name=product.name,
                    price=str(product.price),
                    category=product.category,
                )
