"""SQLAlchemy-backed implementation of CustomerRepository."""

from __future__ import annotations

from sqlalchemy.orm import Session

from ecommerce.domain.model.customer import Customer
from ecommerce.domain.repository.customer_repository import CustomerRepository
from ecommerce.infrastructure.persistence.models import CustomerRow


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, customer_id: int) -> Customer | None:
        row = self._session.get(CustomerRow, customer_id)
        if row is None:
            return None
        return Customer(
            id=row.id,
            name=row.name,
            email=row.email,
            phone=row.phone,
            registered_at=row.registration_date,
        )

    def add(self, customer: Customer) -> None:
        self._session.add(
            CustomerRow(
                id=customer.id,
                name=customer.name,
                email=customer.email,
                phone=customer.phone,
                registration_date=customer.registered_at,
            )
        )
        self._session.flush()
