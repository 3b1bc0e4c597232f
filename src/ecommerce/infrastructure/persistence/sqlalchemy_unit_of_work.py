"""SQLAlchemy implementation of the unit of work.

Each ``with`` block opens a new Session, hence a new transaction, and
closes it on the way out.  Store exceptions leaving the block are
translated into domain errors after the rollback:

* ``OperationalError`` (deadlock, lock timeout, serialization failure,
  "database is locked") -> ``TransactionFailureError``, retryable
* any other ``SQLAlchemyError`` -> ``UnexpectedError``
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ecommerce.application.unit_of_work import UnitOfWork
from ecommerce.domain.exceptions import TransactionFailureError, UnexpectedError
from ecommerce.infrastructure.logging import get_logger
from ecommerce.infrastructure.persistence.sql_customer_repository import (
    SqlAlchemyCustomerRepository,
)
from ecommerce.infrastructure.persistence.sql_inventory_log_repository import (
    SqlAlchemyInventoryLogRepository,
)
from ecommerce.infrastructure.persistence.sql_order_repository import (
    SqlAlchemyOrderRepository,
)
from ecommerce.infrastructure.persistence.sql_product_repository import (
    SqlAlchemyProductRepository,
)

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        lock_timeout_seconds: float | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._lock_timeout_seconds = lock_timeout_seconds
        self._session: Session | None = None

    def __enter__(self) -> UnitOfWork:
        if self._session is not None:
            raise RuntimeError("Unit of work is already in progress")
        session = self._session_factory()
        self._session = session
        try:
            self._apply_lock_timeout(session)
        except SQLAlchemyError:
            self._close()
            raise
        self.customers = SqlAlchemyCustomerRepository(session)
        self.products = SqlAlchemyProductRepository(session)
        self.orders = SqlAlchemyOrderRepository(session)
        self.inventory_log = SqlAlchemyInventoryLogRepository(session)
        return super().__enter__()

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._close()

        if isinstance(exc, OperationalError):
            logger.error("Transaction rolled back: %s", exc.orig or exc)
            raise TransactionFailureError(
                f"Transaction aborted by the database, safe to retry: {exc.orig or exc}"
            ) from exc
        if isinstance(exc, SQLAlchemyError):
            logger.error("Transaction rolled back after unexpected error", exc_info=exc)
            raise UnexpectedError(f"Unexpected database error: {exc}") from exc

    def commit(self) -> None:
        self._require_session().commit()

    def rollback(self) -> None:
        self._require_session().rollback()

    # --- Helpers --------------------------------------------------------------

    def _require_session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work used outside of a 'with' block")
        return self._session

    def _close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _apply_lock_timeout(self, session: Session) -> None:
        if self._lock_timeout_seconds is None:
            return
        if session.get_bind().dialect.name == "postgresql":
            millis = int(self._lock_timeout_seconds * 1000)
            session.execute(text(f"SET LOCAL lock_timeout = {millis}"))
