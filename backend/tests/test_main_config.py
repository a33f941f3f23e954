"""Unit tests for settings and main.py integration."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from loguru import logger
from pydantic import ValidationError

from models.config import Settings, get_settings, settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "CORS_ALLOWED_ORIGIN", "PORT", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        defaults = Settings(_env_file=None)  # type: ignore[call-arg]

        assert defaults.ENVIRONMENT == "development"
        assert defaults.CORS_ALLOWED_ORIGIN == "http://localhost:8899"
        assert defaults.PORT == 80
        assert defaults.LOG_DIR == "logs"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOWED_ORIGIN", "https://example.az/")
        monkeypatch.setenv("PORT", "8080")

        loaded = Settings(_env_file=None)  # type: ignore[call-arg]

        assert loaded.CORS_ALLOWED_ORIGIN == "https://example.az"
        assert loaded.PORT == 8080

    def test_rejects_blank_origin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOWED_ORIGIN", "   ")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_get_settings_returns_singleton(self) -> None:
        assert get_settings() is settings


class TestCorrelationHeader:
    """Tests for the correlation ID middleware."""

    def test_generated_when_missing(self, client: TestClient) -> None:
        response = client.post("/", json={})
        assert len(response.headers["X-Correlation-ID"]) == 8

    def test_echoes_incoming_id(self, client: TestClient) -> None:
        response = client.post("/", json={}, headers={"X-Correlation-ID": "frontend1"})
        assert response.headers["X-Correlation-ID"] == "frontend1"


class TestRequestLogging:
    """Tests for the request logging middleware."""

    def test_response_time_header(self, client: TestClient) -> None:
        response = client.post("/", json={})
        assert response.headers["X-Response-Time"].endswith("s")

    def test_slow_request_warning(self, client: TestClient) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, format="{message}", level="WARNING")
        try:
            with patch.object(settings, "SLOW_REQUEST_THRESHOLD", -1.0):
                client.post("/", json={})
        finally:
            logger.remove(handler_id)

        assert any("Slow request" in message for message in messages)
