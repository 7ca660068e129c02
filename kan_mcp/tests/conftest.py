"""Shared fixtures for the Kan MCP tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kan_mcp.client import KanClient


@pytest.fixture(autouse=True)
def _clean_kan_env(monkeypatch):
    """Keep a developer's KAN_* variables out of the tests."""
    for name in ("KAN_API_KEY", "KAN_API_URL", "KAN_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_client():
    """A KanClient stand-in whose verb methods record calls and return {}."""
    client = MagicMock(spec=KanClient)
    for method in ("request", "get", "post", "put", "delete"):
        setattr(client, method, AsyncMock(return_value={}))
    return client
