"""
Pytest configuration and fixtures for Salud tests.
"""
from __future__ import annotations

import os
from typing import Generator
from unittest.mock import patch

import pytest

MOCK_ENV_VARS = {
    "SESSION_SECRET": "mock_session_secret_for_testing_only",
    "SESSION_TTL_SECONDS": "3600",
    "ALLOWED_EMAILS": "",
    "API_BASE_URL": "http://api.test",
    "BACKEND_LOG_LEVEL": "WARNING",
}

# Set environment variables at module level so settings resolve on import
for key, value in MOCK_ENV_VARS.items():
    os.environ.setdefault(key, value)


@pytest.fixture(scope="session", autouse=True)
def mock_environment() -> Generator[None, None, None]:
    """Mock environment variables for all tests."""
    with patch.dict(os.environ, MOCK_ENV_VARS):
        yield


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached backend settings around every test."""
    from backend.settings import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def api_client(tmp_path, monkeypatch):
    """FastAPI test client backed by a throwaway SQLite file."""
    from fastapi.testclient import TestClient

    from backend import db
    from backend.main import create_app

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'salud-test.db'}")
    monkeypatch.setattr(db, "_engine", None)
    monkeypatch.setattr(db, "_session_factory", None)

    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def sign_up(api_client):
    """Create a user and return the auth headers for it."""

    def _sign_up(email="ana@example.com", password="correct-horse", full_name="Ana"):
        response = api_client.post(
            "/v1/auth/signup",
            json={"email": email, "password": password, "full_name": full_name},
        )
        assert response.status_code == 200, response.text
        token = response.json()["session"]["access_token"]
        return {"Authorization": f"Bearer {token}"}

    return _sign_up


@pytest.fixture
def dashboard_context():
    """Signed-in dashboard context pinned to UTC."""
    from datetime import timezone

    from dashboard.context import DashboardContext

    return DashboardContext(
        token="token-123",
        user={"id": "user-1", "email": "ana@example.com", "full_name": "Ana"},
        timezone=timezone.utc,
    )
