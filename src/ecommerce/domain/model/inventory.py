"""Inventory audit trail and stock adjustment outcomes.

Every stock mutation leaves exactly one ``InventoryLogEntry`` behind.
Entries are frozen: once appended they are never changed or removed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Union

MANUAL_ADJUSTMENT_REASON = "Manual adjustment"


def order_reason(order_id: int) -> str:
    return f"Order {order_id}"


@dataclass(frozen=True)
class StockChange:
    """A committed-to-be stock transition for a single product."""

    product_id: int
    old_stock: int
    new_stock: int

    @property
    def delta(self) -> int:
        return self.new_stock - self.old_stock


@dataclass(frozen=True)
class InventoryLogEntry:
    product_id: int
    old_stock: int
    new_stock: int
    changed_at: datetime
    reason: str
    id: int | None = None

    @staticmethod
    def record(change: StockChange, reason: str, at: datetime) -> InventoryLogEntry:
        return InventoryLogEntry(
            product_id=change.product_id,
            old_stock=change.old_stock,
            new_stock=change.new_stock,
            changed_at=at,
            reason=reason,
        )

    def with_id(self, entry_id: int) -> InventoryLogEntry:
        return replace(self, id=entry_id)


# ---------------------------------------------------------------------------
# Stock adjustment outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StockAdjusted:
    """The adjustment was applied and logged."""

    product_id: int
    old_stock: int
    new_stock: int


@dataclass(frozen=True)
class NegativeStockRejected:
    """The adjustment would have driven stock below zero; nothing changed."""

    product_id: int
    current_stock: int
    attempted_change: int


StockAdjustmentResult = Union[StockAdjusted, NegativeStockRejected]
