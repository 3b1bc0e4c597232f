"""SQLAlchemy-backed implementation of InventoryLogRepository.

Only inserts and reads; there is deliberately no update or delete path.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ecommerce.domain.model.inventory import InventoryLogEntry
from ecommerce.domain.repository.inventory_log_repository import InventoryLogRepository
from ecommerce.infrastructure.persistence.models import InventoryLogRow


class SqlAlchemyInventoryLogRepository(InventoryLogRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def append(self, entry: InventoryLogEntry) -> InventoryLogEntry:
        row = InventoryLogRow(
            product_id=entry.product_id,
            old_stock=entry.old_stock,
            new_stock=entry.new_stock,
            change_date=entry.changed_at,
            reason=entry.reason,
        )
        self._session.add(row)
        self._session.flush()
        return entry.with_id(row.id)

    def list_for_product(self, product_id: int) -> list[InventoryLogEntry]:
        stmt = (
            select(InventoryLogRow)
            .where(InventoryLogRow.product_id == product_id)
            .order_by(InventoryLogRow.id)
        )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def list_all(self) -> list[InventoryLogEntry]:
        stmt = select(InventoryLogRow).order_by(InventoryLogRow.id)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    @staticmethod
    def _to_domain(row: InventoryLogRow) -> InventoryLogEntry:
        return InventoryLogEntry(
            id=row.id,
            product_id=row.product_id,
            old_stock=row.old_stock,
            new_stock=row.new_stock,
            changed_at=row.change_date,
            reason=row.reason,
        )
