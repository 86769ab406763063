"""
Unit tests for the API app factory and server entry point.
"""
from unittest.mock import patch

import pytest

from backend import main

pytestmark = pytest.mark.unit


class TestServerEntryPoint:
    """Running the API under uvicorn."""

    def test_run_uses_env_host_and_port(self, monkeypatch):
        """HOST and PORT from the environment are passed to uvicorn."""
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "9001")

        with patch("uvicorn.run") as mock_run:
            main.run()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("backend.main:app",)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9001

    def test_factory_registers_routes(self):
        """Auth, mood and financial routers are mounted."""
        paths = {route.path for route in main.create_app().routes}

        assert {"/health", "/v1/auth/signup", "/v1/mood_entries", "/v1/financial_entries"} <= paths
