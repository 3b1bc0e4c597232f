"""Abstract repository for Customer entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Persist a new customer."""
