"""Tests for the logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from firmness.config.logging import configure_logging, get_logger
from firmness.config.settings import Settings


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    config = structlog.get_config()
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        structlog.configure(**config)


def _last_line(capsys) -> str:
    return capsys.readouterr().out.strip().splitlines()[-1]


@pytest.mark.usefixtures("restore_logging")
class TestJsonLogging:
    def test_structlog_event_encoded_once(self, capsys) -> None:
        configure_logging(Settings(JWT_KEY="k" * 32, LOG_FORMAT="json", LOG_LEVEL="INFO"))

        get_logger("firmness.tests").info("Request completed", status_code=201, path="/api/products")

        record = json.loads(_last_line(capsys))
        assert record["message"] == "Request completed"
        assert record["status_code"] == 201
        assert record["path"] == "/api/products"
        assert record["level"] == "INFO"
        assert record["logger"] == "firmness.tests"

    def test_sensitive_keys_redacted(self, capsys) -> None:
        configure_logging(Settings(JWT_KEY="k" * 32, LOG_FORMAT="json", LOG_LEVEL="INFO"))

        get_logger("firmness.tests").info("Login attempt", password="hunter22")

        assert json.loads(_last_line(capsys))["password"] == "[REDACTED]"

    def test_stdlib_records_use_json_formatter(self, capsys) -> None:
        configure_logging(Settings(JWT_KEY="k" * 32, LOG_FORMAT="json", LOG_LEVEL="INFO"))

        logging.getLogger("firmness.tests").warning("Product with ID 3 not found")

        record = json.loads(_last_line(capsys))
        assert record["message"] == "Product with ID 3 not found"
        assert record["level"] == "WARNING"
