"""Tests for Loguru logging configuration."""

import json
from pathlib import Path

import pytest
from loguru import logger

from core.correlation import set_correlation_id
from core.logging_config import configure_logging, correlation_filter


@pytest.fixture(autouse=True)
def restore_logger():
    """Drop the sinks a test configured."""
    yield
    logger.remove()


class TestCorrelationFilter:
    """Tests for correlation_filter."""

    def test_adds_current_correlation_id(self) -> None:
        set_correlation_id("abcd1234")
        record: dict = {"extra": {}}

        assert correlation_filter(record) is True  # type: ignore[arg-type]
        assert record["extra"]["correlation_id"] == "abcd1234"

    def test_placeholder_outside_request(self) -> None:
        set_correlation_id("")
        record: dict = {"extra": {}}

        correlation_filter(record)  # type: ignore[arg-type]
        assert record["extra"]["correlation_id"] == "-"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_creates_log_file(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "nested" / "logs"
        configure_logging("development", str(log_dir))

        logger.info("hello from development")
        logger.complete()

        content = (log_dir / "contact.log").read_text(encoding="utf-8")
        assert "hello from development" in content

    def test_production_writes_json(self, tmp_path: Path) -> None:
        set_correlation_id("feedbeef")
        configure_logging("production", str(tmp_path))

        logger.info("hello from production")
        logger.complete()

        lines = (tmp_path / "contact.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["record"]["message"] == "hello from production"
        assert record["record"]["extra"]["correlation_id"] == "feedbeef"
