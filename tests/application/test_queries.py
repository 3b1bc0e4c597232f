"""Tests for the read-only query handlers."""

import pytest

from ecommerce.application.create_order import CreateOrderHandler
from ecommerce.application.customer_orders import CustomerOrdersHandler
from ecommerce.application.dto import OrderLineSpec
from ecommerce.application.price_list import PriceListHandler
from ecommerce.application.show_order import ShowOrderHandler
from ecommerce.application.show_product import ShowProductHandler
from ecommerce.application.top_selling_products import TopSellingProductsHandler
from ecommerce.domain.exceptions import (
    CustomerNotFoundError,
    InvalidRequestError,
    OrderNotFoundError,
    ProductNotFoundError,
)
from tests.fakes import FakeUnitOfWork, sample_products


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork(products=sample_products())


class TestShowProduct:

    def test_found(self, uow):
        dto = ShowProductHandler(uow).handle(1)
        assert (dto.name, dto.price, dto.stock) == ("Laptop", "$999.99", 50)

    def test_missing_raises(self, uow):
        with pytest.raises(ProductNotFoundError):
            ShowProductHandler(uow).handle(99)


class TestShowOrder:

    def test_found(self, uow):
        order_id = CreateOrderHandler(uow).handle(1, [OrderLineSpec(1, 1), OrderLineSpec(2, 2)])
        dto = ShowOrderHandler(uow).handle(order_id)

        assert dto.total == "$1059.97"
        assert dto.status == "PENDING"
        assert [(i.product_id, i.quantity, i.line_total) for i in dto.items] == [
            (1, 1, "$999.99"),
            (2, 2, "$59.98"),
        ]

    def test_missing_raises(self, uow):
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(uow).handle(1)


class TestPriceList:

    def test_ordered_by_category_then_id(self, uow):
        entries = list(PriceListHandler(uow).handle())
        assert [(e.category, e.product_id) for e in entries] == [
            ("Books", 4),
            ("Electronics", 1),
            ("Electronics", 2),
            ("Electronics", 3),
        ]

    def test_is_lazy(self, uow):
        entries = PriceListHandler(uow).handle()
        assert next(entries).name == "Book"
        entries.close()


class TestCustomerOrders:

    def test_newest_first(self, uow):
        handler = CreateOrderHandler(uow)
        first = handler.handle(1, [OrderLineSpec(1, 1)])
        second = handler.handle(1, [OrderLineSpec(2, 1)])

        summaries = CustomerOrdersHandler(uow).handle(1)

        assert [s.id for s in summaries] == [second, first]

    def test_customer_without_orders(self, uow):
        assert CustomerOrdersHandler(uow).handle(1) == []

    def test_unknown_customer(self, uow):
        with pytest.raises(CustomerNotFoundError):
            CustomerOrdersHandler(uow).handle(2)


class TestTopSellers:

    def test_ranked_by_units(self, uow):
        handler = CreateOrderHandler(uow)
        handler.handle(1, [OrderLineSpec(2, 5), OrderLineSpec(1, 1)])
        handler.handle(1, [OrderLineSpec(3, 2), OrderLineSpec(2, 1)])

        sellers = TopSellingProductsHandler(uow).handle()

        assert [(s.name, s.units_sold) for s in sellers] == [
            ("Mouse", 6),
            ("Keyboard", 2),
            ("Laptop", 1),
        ]

    def test_limit(self, uow):
        CreateOrderHandler(uow).handle(1, [OrderLineSpec(2, 5), OrderLineSpec(1, 1)])
        assert len(TopSellingProductsHandler(uow).handle(limit=1)) == 1

    def test_no_sales(self, uow):
        assert TopSellingProductsHandler(uow).handle() == []

    def test_bad_limit(self, uow):
        with pytest.raises(InvalidRequestError):
            TopSellingProductsHandler(uow).handle(limit=0)
