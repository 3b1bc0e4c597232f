"""Sample customers and products for a fresh database."""

from __future__ import annotations

from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.model.customer import Customer
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.infrastructure.logging import get_logger

logger = get_logger(__name__)

SAMPLE_CUSTOMERS = [
    (1, "John Doe", "john@email.com", "123-456-7890"),
    (2, "Jane Smith", "jane@email.com", "123-456-7891"),
    (3, "Bob Johnson", "bob@email.com", "123-456-7892"),
]

SAMPLE_PRODUCTS = [
    (1, "Laptop", "High-performance laptop", "999.99", 50, "Electronics"),
    (2, "Mouse", "Wireless mouse", "29.99", 100, "Electronics"),
    (3, "Keyboard", "Mechanical keyboard", "79.99", 75, "Electronics"),
    (4, "Book", "Programming guide", "39.99", 200, "Books"),
    (5, "Headphones", "Noise-cancelling headphones", "199.99", 30, "Electronics"),
]


def seed_sample_data(uow: UnitOfWork) -> bool:
    """Insert the sample data unless customer 1 already exists.

    Returns True if anything was inserted.
    """
    with uow:
        if uow.customers.get_by_id(SAMPLE_CUSTOMERS[0][0]) is not None:
            logger.info("Sample data already present, skipping seed")
            return False

        for cid, name, email, phone in SAMPLE_CUSTOMERS:
            uow.customers.add(Customer(id=cid, name=name, email=email, phone=phone))
        for pid, name, description, price, stock, category in SAMPLE_PRODUCTS:
            uow.products.add(
                Product(
                    id=pid,
                    name=name,
                    description=description,
                    price=Money.of(price),
                    stock_quantity=stock,
                    category=category,
                )
            )
        uow.commit()

    logger.info(
        "Seeded %d customers and %d products", len(SAMPLE_CUSTOMERS), len(SAMPLE_PRODUCTS)
    )
    return True
