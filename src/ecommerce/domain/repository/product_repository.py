"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and in the tests.

``for_update=True`` asks the store to hold a write lock on the returned
rows until the surrounding unit of work ends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from ecommerce.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int, *, for_update: bool = False) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_many(
        self, product_ids: Iterable[int], *, for_update: bool = False
    ) -> dict[int, Product]:
        """Batched lookup. Ids that do not exist are simply absent."""

    @abstractmethod
    def list_by_category(self, category: str, *, for_update: bool = False) -> list[Product]:
        """Return every product of a category, ordered by ID."""

    @abstractmethod
    def iter_price_list(self) -> Iterator[Product]:
        """Stream every product ordered by category, then ID."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist price and stock of an existing product."""
