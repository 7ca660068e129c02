"""Environment configuration for the Kan MCP server."""

import os

API_KEY_ENV = "KAN_API_KEY"
API_URL_ENV = "KAN_API_URL"
DEBUG_ENV = "KAN_DEBUG"

DEFAULT_BASE_URL = "https://board.local.gum.zone/api/v1"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_enabled_from_env() -> bool:
    """Return True when KAN_DEBUG is set to 1/true/yes/on (any case)."""
    value = os.getenv(DEBUG_ENV, "").strip().lower()
    return value in _TRUTHY


def get_api_url() -> str:
    """Get the API base URL, honouring the KAN_API_URL override."""
    return (os.getenv(API_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")


def get_api_key() -> str | None:
    return os.getenv(API_KEY_ENV) or None
