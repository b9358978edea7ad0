"""
HTTP Transport - the "perform GET, get back status + body" capability.

Source clients receive a transport instead of building their own HTTP
client, so tests can substitute a fake or an ``httpx.MockTransport``.

Usage:
    async with HttpxTransport(timeout=10.0) as transport:
        response = await transport.get("https://api.example.com/item")
        if response.is_success:
            data = response.json()

Proxy configuration is read by httpx from HTTP_PROXY / HTTPS_PROXY.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx
from typing_extensions import Self

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when a request could not be completed (DNS, connect, timeout, ...)."""


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status and body of a completed request."""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON. Raises ``json.JSONDecodeError`` on bad input."""
        return json.loads(self.body)


class HttpTransport(Protocol):
    """Minimal asynchronous GET capability."""

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> TransportResponse: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """
    ``HttpTransport`` backed by ``httpx.AsyncClient``.

    Args:
        timeout: Request timeout in seconds
        headers: Default headers for all requests
        transport: Optional low-level httpx transport (``httpx.MockTransport`` in tests)
    """

    def __init__(
        self,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
            follow_redirects=True,
            transport=transport,
        )

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> TransportResponse:
        try:
            response = await self._client.get(url, headers=headers or {})
        except httpx.TimeoutException as e:
            logger.debug(f"Timeout for {url}")
            raise TransportError(f"Request timeout after {self._timeout}s") from e
        except httpx.RequestError as e:
            logger.debug(f"Request error for {url}: {e!r}")
            raise TransportError(f"Connection failed: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


__all__ = ["HttpTransport", "HttpxTransport", "TransportError", "TransportResponse"]
