"""Abstract unit of work: one atomic transaction across all repositories.

Handlers open a unit of work with ``with uow:``, do their reads and writes
through ``uow.products`` / ``uow.orders`` / ... and call ``uow.commit()``
as the last statement of the block.  Leaving the block without a commit,
or through an exception, rolls everything back.

A unit of work may be entered many times in sequence; each ``with``
block is a fresh transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.repository.customer_repository import CustomerRepository
from ecommerce.domain.repository.inventory_log_repository import InventoryLogRepository
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):
    customers: CustomerRepository
    products: ProductRepository
    orders: OrderRepository
    inventory_log: InventoryLogRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Rolling back after a commit is a no-op.
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change of the current block durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change of the current block."""
