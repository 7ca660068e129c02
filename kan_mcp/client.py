"""
Kan API client implementation.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from . import config

logger = logging.getLogger(__name__)

LOG_TRUNCATE_LIMIT = 1000

# Network failures are surfaced as httpx's own exceptions, never wrapped.
TransportError = httpx.RequestError


class KanAPIError(Exception):
    """Exception raised when the Kan API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


def truncate_for_log(value: str, limit: int = LOG_TRUNCATE_LIMIT) -> str:
    """Cut ``value`` to ``limit`` characters, noting how many were dropped."""
    if len(value) <= limit:
        return value
    return f"{value[:limit]}... [truncated {len(value) - limit} chars]"


def to_log_string(value: Any) -> str:
    """Render any value for a debug line. Never raises."""
    if value is None:
        return "none"
    if isinstance(value, str):
        return truncate_for_log(value)
    try:
        return truncate_for_log(json.dumps(value, separators=(",", ":")))
    except (TypeError, ValueError) as e:
        return f'"[unserializable: {e}]"'


@dataclass
class RequestTrace:
    """Bookkeeping for one request, used only to build debug lines."""

    request_id: int
    method: str
    url: str
    body: str
    started_at: float = field(default_factory=time.monotonic)

    @property
    def duration_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)

    def dispatched(self) -> str:
        return f"#{self.request_id} -> {self.method} {self.url} body={self.body}"

    def failed(self, error: BaseException) -> str:
        return f"#{self.request_id} xx {self.method} {self.url} durationMs={self.duration_ms} error={error}"

    def completed(self, response: httpx.Response) -> str:
        content_type = response.headers.get("content-type") or "none"
        return (
            f"#{self.request_id} <- {self.method} {self.url} status={response.status_code} "
            f"durationMs={self.duration_ms} contentType={content_type}"
        )


class KanClient:
    """
    Async client for the Kan REST API.

    Knows nothing about boards or cards: it sends one authenticated request,
    traces it when debugging is on, and classifies the response.

    Example:
        >>> async with KanClient(api_key="kan_...") as client:
        ...     workspaces = await client.get("/workspaces")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        debug: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Kan API client.

        Args:
            api_key: Kan API key, sent as the ``x-api-key`` header
            base_url: API root (default: KAN_API_URL or the built-in default)
            debug: Emit request traces (default: read KAN_DEBUG once, now)
            transport: Optional httpx transport, mainly for tests
        """
        self.api_key = api_key
        self.base_url = (base_url or config.get_api_url()).rstrip("/")
        self.debug = config.debug_enabled_from_env() if debug is None else debug
        self._request_counter = 0
        self._client = httpx.AsyncClient(
            headers={"x-api-key": api_key},
            transport=transport,
        )

    async def __aenter__(self) -> "KanClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _debug_log(self, message: str) -> None:
        if not self.debug:
            return
        logger.debug("[kan-debug] %s", message)

    def _next_request_id(self) -> int:
        self._request_counter += 1
        return self._request_counter

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """
        Make one API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g., "/workspaces")
            body: JSON body; omitted from the request when None

        Returns:
            The parsed JSON response, or ``{"success": True}`` when the
            response is not JSON

        Raises:
            KanAPIError: If the API returns a non-2xx status
            httpx.RequestError: If no response was received
        """
        url = f"{self.base_url}{path}"
        trace = RequestTrace(
            request_id=self._next_request_id(),
            method=method,
            url=url,
            body=to_log_string(body),
        )
        self._debug_log(trace.dispatched())

        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
            kwargs["headers"] = {"Content-Type": "application/json"}

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            self._debug_log(trace.failed(e))
            raise

        self._debug_log(trace.completed(response))

        if not response.is_success:
            text = response.text
            self._debug_log(f"#{trace.request_id} !! errorBody={to_log_string(text)}")
            raise KanAPIError(
                f"Kan API {response.status_code}: {text}",
                status_code=response.status_code,
                body=text,
            )

        content_type = response.headers.get("content-type") or ""
        if "application/json" not in content_type:
            self._debug_log(f"#{trace.request_id} <- nonJsonResponse")
            return {"success": True}

        try:
            data = response.json()
        except ValueError as e:
            raise KanAPIError(
                f"Kan API {response.status_code}: invalid JSON response",
                status_code=response.status_code,
                body=response.text,
            ) from e

        self._debug_log(f"#{trace.request_id} <- responseBody={to_log_string(data)}")
        return data

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
