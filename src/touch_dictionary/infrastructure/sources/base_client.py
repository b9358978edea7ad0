"""
Base Source Client - common GET/status/JSON pattern for reference APIs.

Provides:
- Injected transport and diagnostics
- Hook for source-specific status codes (e.g., 404)
- Consistent conversion of failures into typed SourceErrors

One lookup issues at most one request per source, with no retry or rate
limiting.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from touch_dictionary.infrastructure.http.transport import TransportError
from touch_dictionary.shared.diagnostics import LoggerDiagnostics
from touch_dictionary.shared.exceptions import SourceParseError, SourceUnavailableError

if TYPE_CHECKING:
    from touch_dictionary.infrastructure.http.transport import HttpTransport, TransportResponse
    from touch_dictionary.shared.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

# Sentinel object to indicate "continue normal processing" from _handle_expected_status
_CONTINUE = object()


class BaseSourceClient:
    """
    Base class for reference API clients.

    Subclasses set ``source_name`` and ``source_label`` and can override
    ``_handle_expected_status()`` for service-specific status codes.
    Failures are raised, never emitted; the caller reports them.
    """

    source_name: str = "source"
    source_label: str = "Source"

    def __init__(
        self,
        transport: HttpTransport,
        *,
        base_url: str,
        diagnostics: Diagnostics | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._diagnostics = diagnostics or LoggerDiagnostics()
        self._headers = headers or {}

    def _emit(self, level: int, message: str) -> None:
        self._diagnostics.emit(level, self.source_name, message)

    async def _make_request(self, url: str) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Returns:
            Decoded JSON, or whatever ``_handle_expected_status`` short-circuits with

        Raises:
            SourceUnavailableError: Transport failure or unexpected status
            SourceParseError: Body is not valid JSON
        """
        try:
            response = await self._transport.get(url, headers=self._headers)
        except TransportError as e:
            raise SourceUnavailableError(self.source_name, f"Failed to connect to {self.source_label}: {e}") from e

        expected = self._handle_expected_status(response, url)
        if expected is not _CONTINUE:
            return expected

        if not response.is_success:
            raise SourceUnavailableError(
                self.source_name,
                f"{self.source_label} returned status: {response.status_code}",
                status_code=response.status_code,
            )

        self._emit(logging.DEBUG, f"Raw response: {response.body[:200]}")
        return self._parse_response(response)

    def _handle_expected_status(self, response: TransportResponse, url: str) -> Any:
        """
        Handle expected non-2xx status codes.

        Return a value to short-circuit, or ``_CONTINUE`` for normal processing.
        """
        return _CONTINUE

    def _parse_response(self, response: TransportResponse) -> Any:
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise SourceParseError(self.source_name, f"invalid JSON ({e})") from e

    def _schema_error(self, message: str) -> SourceParseError:
        return SourceParseError(self.source_name, message)


__all__ = ["BaseSourceClient"]
