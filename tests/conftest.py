"""
Shared test fixtures for testrail-mcp tests.
Patches the config module so no real .env is read and no real server is contacted.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from testrail_mcp import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "BASE_URL", "https://example.testrail.io")
    monkeypatch.setattr(config, "USERNAME", "qa@example.com")
    monkeypatch.setattr(config, "API_KEY", "fake-api-key")
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", 30)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 10_000_000)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_LOG_SAMPLE_RATE", 1.0)


@pytest.fixture(autouse=True)
def _reset_client_cache():
    """Reset the cached TestRailClient between tests."""
    from testrail_mcp.mcp_server import _core

    _core._client = None
    yield
    _core._client = None
