import logging

import pytest
from pydantic import ValidationError

from ecommerce.infrastructure.config import Settings, get_settings
from ecommerce.infrastructure.logging import KeyValueFormatter, configure_logging


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.DATABASE_URL == "sqlite:///data/ecommerce.db"
        assert settings.LOCK_TIMEOUT_SECONDS == 5.0

    def test_postgres_url_uses_psycopg(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://shop:secret@db/shop")
        assert get_settings().DATABASE_URL == "postgresql+psycopg://shop:secret@db/shop"

    def test_lock_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("LOCK_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:

    def test_key_value_format(self):
        record = logging.LogRecord(
            "ecommerce.test", logging.WARNING, __file__, 1, "Order %s rejected", (7,), None
        )
        line = KeyValueFormatter().format(record)
        assert "level='WARNING'" in line
        assert "message='Order 7 rejected'" in line

    def test_configure_logging_installs_one_handler(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging()
            configure_logging()
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, KeyValueFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
