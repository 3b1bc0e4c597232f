"""Abstract repository for the append-only inventory audit trail."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.inventory import InventoryLogEntry


class InventoryLogRepository(ABC):

    @abstractmethod
    def append(self, entry: InventoryLogEntry) -> InventoryLogEntry:
        """Store a new entry and return it with its assigned ID."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[InventoryLogEntry]:
        """Entries of one product in insertion order."""

    @abstractmethod
    def list_all(self) -> list[InventoryLogEntry]:
        """Every entry in insertion order."""
