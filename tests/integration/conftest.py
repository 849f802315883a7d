"""
Shared fixtures for integration tests.

Runs the real application (lifespan included) with a low bcrypt cost.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from passgate.api.main import app
from passgate.config.settings import get_settings


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Create a test client with a fresh credential store per test."""
    monkeypatch.setenv("BCRYPT_COST", "4")
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
