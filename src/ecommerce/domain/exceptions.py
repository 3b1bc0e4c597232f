"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Store-level failures are translated into DomainException subclasses by the
unit of work, so callers never need to import SQLAlchemy to tell a rejected
order from a failed transaction.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    retryable = False


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidRequestError(ValidationError):
    """The request itself is malformed (empty lines, bad quantity, bad percent)."""


class InsufficientStockError(ValidationError):
    """An order line asks for more units than the product has in stock."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product ID {product_id} "
            f"(need {requested}, have {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product ID {product_id} not found")
        self.product_id = product_id


class CustomerNotFoundError(EntityNotFoundError):
    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer ID {customer_id} not found")
        self.customer_id = customer_id


class OrderNotFoundError(EntityNotFoundError):
    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class TransactionFailureError(DomainException):
    """The store aborted the transaction (deadlock, lock timeout, serialization).

    Nothing was committed; the caller may retry the whole operation.
    """

    retryable = True


class UnexpectedError(DomainException):
    """Any other store failure. Nothing was committed."""
