"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one requested line (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    product_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: int
    status: str
    items: list[OrderItemDTO]
    total: str
    order_date: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    id: int
    order_date: str
    total: str
    status: str


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str
    stock: int
    category: str


@dataclass(frozen=True)
class PriceListEntryDTO:
    product_id: int
    name: str
    price: str
    category: str


@dataclass(frozen=True)
class TopSellerDTO:
    product_id: int
    name: str
    price: str
    units_sold: int


@dataclass
class SweepReport:
    """Outcome of one daily processing sweep."""

    processed: list[int] = field(default_factory=list)
    failures: dict[int, str] = field(default_factory=dict)

    @property
    def processed_count(self) -> int:
        return len(self.processed)
