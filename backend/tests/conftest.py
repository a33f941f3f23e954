"""
Pytest configuration and fixtures for backend tests.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Set test environment variables before importing config
os.environ["ENVIRONMENT"] = "test"
os.environ["CORS_ALLOWED_ORIGIN"] = "http://localhost:8899"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="contact-logs-")
os.environ.pop("SENTRY_DSN", None)

from models.schemas import ContactFormRequest  # noqa: E402

ALLOWED_ORIGIN = "http://localhost:8899"


@pytest.fixture
def client():
    """Create a test client for the contact API."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_form() -> ContactFormRequest:
    """A submission that passes every validation rule."""
    return ContactFormRequest(
        name="Test User",
        email="test@example.com",
        subject="",
        message="Hello there",
        lang="en",
    )
