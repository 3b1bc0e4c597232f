"""Application service: Adjust Stock use case.

A manual restock (positive delta) or write-off (negative delta) of a
single product.  An adjustment that would leave negative stock is not an
error: it comes back as ``NegativeStockRejected`` and nothing is written.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import InvalidRequestError, ProductNotFoundError
from ecommerce.domain.model.inventory import (
    MANUAL_ADJUSTMENT_REASON,
    InventoryLogEntry,
    NegativeStockRejected,
    StockAdjustmentResult,
    StockChange,
)
from ecommerce.infrastructure.logging import get_logger

logger = get_logger(__name__)


class AdjustStockHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._uow = uow
        self._clock = clock

    def handle(self, product_id: int, delta: int) -> StockAdjustmentResult:
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise InvalidRequestError(f"Stock delta must be an integer, got {delta!r}")

        with self._uow as uow:
            product = uow.products.get_by_id(product_id, for_update=True)
            if product is None:
                raise ProductNotFoundError(product_id)

            result = product.adjust_stock(delta)
            if isinstance(result, NegativeStockRejected):
                logger.warning(
                    "Stock cannot be negative for %s: current %d, attempted change %d",
                    product.name,
                    result.current_stock,
                    result.attempted_change,
                )
                return result

            uow.products.save(product)
            uow.inventory_log.append(
                InventoryLogEntry.record(
                    StockChange(product.id, result.old_stock, result.new_stock),
                    MANUAL_ADJUSTMENT_REASON,
                    self._clock(),
                )
            )
            uow.commit()

        logger.info(
            "Stock updated for %s: %d -> %d", product.name, result.old_stock, result.new_stock
        )
        return result
