"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> int:
        """Persist a new order with its items, assign ``order.id`` and return it.

        Ids come from the store and are strictly increasing.
        """

    @abstractmethod
    def get_by_id(self, order_id: int, *, for_update: bool = False) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_pending_ids(self) -> list[int]:
        """IDs of PENDING orders, oldest order date first."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> list[Order]:
        """Orders of a customer, newest order date first."""

    @abstractmethod
    def units_sold_by_product(self, limit: int) -> list[tuple[int, int]]:
        """``(product_id, units)`` pairs, best sellers first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist the status of an existing order."""
