"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from ecommerce.domain.exceptions import OrderNotFoundError
from ecommerce.domain.model.order import Order, OrderItem, OrderStatus
from ecommerce.domain.model.value_objects import Money, Quantity
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.infrastructure.persistence.models import OrderItemRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> int:
        row = OrderRow(
            customer_id=order.customer_id,
            order_date=order.order_date,
            total_amount=order.total_amount.amount,
            status=order.status.value,
            items=[
                OrderItemRow(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                )
                for item in order.items
            ],
        )
        self._session.add(row)
        self._session.flush()

        order.id = row.id
        order.items = [
            replace(item, id=item_row.id) for item, item_row in zip(order.items, row.items)
        ]
        return row.id

    def get_by_id(self, order_id: int, *, for_update: bool = False) -> Order | None:
        stmt = (
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .options(selectinload(OrderRow.items))
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        row = self._session.scalars(stmt).one_or_none()
        return None if row is None else self._to_domain(row)

    def list_pending_ids(self) -> list[int]:
        stmt = (
            select(OrderRow.id)
            .where(OrderRow.status == OrderStatus.PENDING.value)
            .order_by(OrderRow.order_date, OrderRow.id)
        )
        return list(self._session.scalars(stmt))

    def list_by_customer(self, customer_id: int) -> list[Order]:
        stmt = (
            select(OrderRow)
            .where(OrderRow.customer_id == customer_id)
            .options(selectinload(OrderRow.items))
            .order_by(OrderRow.order_date.desc(), OrderRow.id.desc())
        )
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def units_sold_by_product(self, limit: int) -> list[tuple[int, int]]:
        units = func.sum(OrderItemRow.quantity).label("units")
        stmt = (
            select(OrderItemRow.product_id, units)
            .group_by(OrderItemRow.product_id)
            .order_by(units.desc(), OrderItemRow.product_id)
            .limit(limit)
        )
        return [(product_id, int(total)) for product_id, total in self._session.execute(stmt)]

    def save(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            raise OrderNotFoundError(order.id)
        row.status = order.status.value
        self._session.flush()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        items = [
            OrderItem(
                product_id=i.product_id,
                quantity=Quantity(i.quantity),
                unit_price=Money(i.unit_price),
                id=i.id,
            )
            for i in row.items
        ]
        return Order(
            id=row.id,
            customer_id=row.customer_id,
            items=items,
            total_amount=Money(row.total_amount),
            status=OrderStatus(row.status),
            order_date=row.order_date,
        )
