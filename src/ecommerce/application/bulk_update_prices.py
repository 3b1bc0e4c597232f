"""Application service: Bulk Update Prices use case.

Reprices a whole category by a signed percentage.  Every new price is
computed and checked before the first product changes, and all rows are
written in one unit of work: the category moves as a block or not at all.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import InvalidRequestError
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.infrastructure.logging import get_logger

logger = get_logger(__name__)

MIN_PERCENT = Decimal("-100")


class BulkUpdatePricesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category: str, percent: str | int | float | Decimal) -> int:
        """Apply ``percent`` to every product in ``category``.

        Returns the number of products updated (0 for an empty category).
        Raises InvalidRequestError if ``percent`` is not above -100 or if
        any rounded new price would not be positive.
        """
        pct = self._parse_percent(percent)

        with self._uow as uow:
            products = uow.products.list_by_category(category, for_update=True)
            if not products:
                logger.info("No products found in category: %s", category)
                return 0

            # Phase 1: compute and validate every new price
            repriced: list[tuple[Product, Money]] = []
            for product in products:
                new_price = product.price_after(pct)
                if new_price.amount <= 0:
                    raise InvalidRequestError(
                        f"A {pct}% change would price {product.name} at {new_price}; "
                        f"no prices in '{category}' were changed"
                    )
                repriced.append((product, new_price))

            # Phase 2: apply
            for product, new_price in repriced:
                logger.debug("Updating %s: %s -> %s", product.name, product.price, new_price)
                product.update_price(new_price)
                uow.products.save(product)

            uow.commit()

        logger.info("Updated %d products in category: %s", len(repriced), category)
        return len(repriced)

    @staticmethod
    def _parse_percent(percent: str | int | float | Decimal) -> Decimal:
        try:
            pct = Decimal(str(percent))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidRequestError(f"Invalid percentage: {percent!r}") from exc
        if not pct.is_finite() or pct <= MIN_PERCENT:
            raise InvalidRequestError(f"Percentage must be greater than -100, got {percent}")
        return pct
