"""Application service: Daily Order Processing sweep.

Moves every PENDING order to PROCESSED, oldest first.  Unlike the other
use cases this is best-effort: each order gets its own short unit of
work, so one failing order is reported and skipped while the rest of
the sweep carries on and earlier transitions stay committed.
"""

from __future__ import annotations

from ecommerce.application.dto import SweepReport
from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import DomainException
from ecommerce.domain.model.order import OrderStatus
from ecommerce.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ProcessDailyOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> SweepReport:
        with self._uow as uow:
            pending_ids = uow.orders.list_pending_ids()

        logger.info("Processing %d pending order(s)", len(pending_ids))
        report = SweepReport()

        for order_id in pending_ids:
            try:
                if self._process_one(order_id):
                    report.processed.append(order_id)
            except DomainException as exc:
                logger.error("Error processing order %s: %s", order_id, exc)
                report.failures[order_id] = str(exc)
            except Exception as exc:
                logger.exception("Unexpected error processing order %s", order_id)
                report.failures[order_id] = f"Unexpected error: {exc}"

        logger.info(
            "Total orders processed: %d (%d failed)",
            report.processed_count,
            len(report.failures),
        )
        return report

    def _process_one(self, order_id: int) -> bool:
        """Transition one order. False if it is no longer PENDING."""
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id, for_update=True)
            if order is None or order.status != OrderStatus.PENDING:
                return False
            order.mark_processed()
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Processed order %s for customer %s, amount %s",
            order.id,
            order.customer_id,
            order.total_amount,
        )
        return True
