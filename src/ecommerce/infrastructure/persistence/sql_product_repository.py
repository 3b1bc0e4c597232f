"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session

from ecommerce.domain.exceptions import ProductNotFoundError, TransactionFailureError
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository
from ecommerce.infrastructure.persistence.models import ProductRow

PRICE_LIST_BATCH = 100


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session
        # Stock level each product had when this session read it.
        self._read_stock: dict[int, int] = {}

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int, *, for_update: bool = False) -> Product | None:
        stmt = select(ProductRow).where(ProductRow.id == product_id)
        row = self._session.scalars(self._locked(stmt, for_update)).one_or_none()
        return None if row is None else self._load(row)

    def get_many(
        self, product_ids: Iterable[int], *, for_update: bool = False
    ) -> dict[int, Product]:
        ids = list(product_ids)
        if not ids:
            return {}
        # Ordered by ID so concurrent lockers always queue in the same order.
        stmt = select(ProductRow).where(ProductRow.id.in_(ids)).order_by(ProductRow.id)
        rows = self._session.scalars(self._locked(stmt, for_update))
        return {row.id: self._load(row) for row in rows}

    def list_by_category(self, category: str, *, for_update: bool = False) -> list[Product]:
        stmt = (
            select(ProductRow)
            .where(ProductRow.category == category)
            .order_by(ProductRow.id)
        )
        return [self._load(row) for row in self._session.scalars(self._locked(stmt, for_update))]

    def iter_price_list(self) -> Iterator[Product]:
        stmt = (
            select(ProductRow)
            .order_by(ProductRow.category, ProductRow.id)
            .execution_options(yield_per=PRICE_LIST_BATCH)
        )
        for row in self._session.scalars(stmt):
            yield self._to_domain(row)

    def add(self, product: Product) -> None:
        self._session.add(
            ProductRow(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price.amount,
                stock_quantity=product.stock_quantity,
                category=product.category,
            )
        )
        self._session.flush()

    def save(self, product: Product) -> None:
        """Write price and stock back, provided the stock is still what we read.

        A row whose stock changed underneath this session is not overwritten;
        the transaction fails instead and can be retried from the start.
        """
        stmt = (
            update(ProductRow)
            .where(ProductRow.id == product.id)
            .values(price=product.price.amount, stock_quantity=product.stock_quantity)
        )
        expected = self._read_stock.get(product.id)
        if expected is not None:
            stmt = stmt.where(ProductRow.stock_quantity == expected)

        if self._session.execute(stmt).rowcount == 0:
            if expected is None or self._session.scalar(
                select(ProductRow.id).where(ProductRow.id == product.id)
            ) is None:
                raise ProductNotFoundError(product.id)
            raise TransactionFailureError(
                f"Stock of product ID {product.id} changed concurrently "
                f"(expected {expected}), retry the operation"
            )
        self._read_stock[product.id] = product.stock_quantity

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _locked(stmt: Select, for_update: bool) -> Select:
        if not for_update:
            return stmt
        return stmt.with_for_update().execution_options(populate_existing=True)

    def _load(self, row: ProductRow) -> Product:
        self._read_stock[row.id] = row.stock_quantity
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(row.price),
            stock_quantity=row.stock_quantity,
            category=row.category,
            description=row.description,
        )
