"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from sqlalchemy import Engine, create_engine, event, make_url
from sqlalchemy.orm import Session, sessionmaker

from ecommerce.infrastructure.config import get_settings
from ecommerce.infrastructure.persistence.models import Base
from ecommerce.infrastructure.persistence.sqlalchemy_unit_of_work import (
    SqlAlchemyUnitOfWork,
)


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    lock_timeout_seconds: float = 5.0,
) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        # The driver waits up to ``timeout`` seconds for a locked database.
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"timeout": lock_timeout_seconds},
        )
        _begin_immediate_on_sqlite(engine)
        return engine

    return create_engine(url, echo=echo, pool_pre_ping=True)


def _begin_immediate_on_sqlite(engine: Engine) -> None:
    """Take SQLite's write lock when a transaction begins.

    SQLite ignores ``SELECT ... FOR UPDATE`` and pysqlite defers BEGIN until
    the first write, so two transactions could otherwise read the same stock
    level before either writes it back.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    return build_engine(
        settings.DATABASE_URL,
        echo=settings.SQL_ECHO,
        lock_timeout_seconds=settings.LOCK_TIMEOUT_SECONDS,
    )


@lru_cache
def session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


def unit_of_work() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(
        session_factory(),
        lock_timeout_seconds=get_settings().LOCK_TIMEOUT_SECONDS,
    )


def init_db() -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(get_engine())


def reset_caches() -> None:
    """Forget cached settings and engine, e.g. after the environment changed."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    session_factory.cache_clear()
    get_engine.cache_clear()
    get_settings.cache_clear()
