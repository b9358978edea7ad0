"""
Wikipedia Page Summary Integration

API Documentation: https://en.wikipedia.org/api/rest_v1/

Response shape:
    {"title": "...", "extract": "...",
     "thumbnail": {"source": "...", "width": 320, "height": 213},
     "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/..."}}}

Wikimedia asks API consumers to send an identifying User-Agent.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import TYPE_CHECKING, Any

from touch_dictionary.domain.entities.lookup import WikipediaSection
from touch_dictionary.infrastructure.sources.base_client import _CONTINUE, BaseSourceClient
from touch_dictionary.shared.exceptions import DisambiguationError, NotFoundError
from touch_dictionary.shared.settings import DEFAULT_USER_AGENT, WIKIPEDIA_SUMMARY_URL

if TYPE_CHECKING:
    from touch_dictionary.infrastructure.http.transport import HttpTransport, TransportResponse
    from touch_dictionary.shared.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

DISAMBIGUATION_MARKER = "may refer to"

_NOT_FOUND = object()


def page_title(query: str) -> str:
    """Wikipedia title form of a query: spaces become underscores."""
    return query.replace(" ", "_")


def is_disambiguation(extract: str) -> bool:
    """Heuristic for disambiguation stubs and empty pages."""
    return not extract or DISAMBIGUATION_MARKER in extract.lower()


class WikipediaClient(BaseSourceClient):
    """
    Wikipedia REST page-summary client.

    Usage:
        client = WikipediaClient(transport, user_agent="MyApp/1.0 (contact)")
        section = await client.fetch("albert einstein")
    """

    source_name = "wikipedia"
    source_label = "Wikipedia API"

    def __init__(
        self,
        transport: HttpTransport,
        *,
        base_url: str = WIKIPEDIA_SUMMARY_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        super().__init__(
            transport,
            base_url=base_url,
            diagnostics=diagnostics,
            headers={"User-Agent": user_agent},
        )

    def _handle_expected_status(self, response: TransportResponse, url: str) -> Any:
        """Handle 404 (page not found)."""
        if response.status_code == 404:
            return _NOT_FOUND
        return _CONTINUE

    async def fetch(self, query: str) -> WikipediaSection:
        """
        Fetch the page summary for a normalized query.

        Raises:
            NotFoundError: No page with that title
            DisambiguationError: Disambiguation page or empty extract
            SourceUnavailableError: Transport failure or unexpected status
            SourceParseError: Body does not match the summary schema
        """
        self._emit(logging.INFO, f"Fetching summary for '{query}' from Wikipedia API")

        url = f"{self._base_url}/{urllib.parse.quote(page_title(query), safe='')}"
        data = await self._make_request(url)

        if data is _NOT_FOUND:
            raise NotFoundError(self.source_name, query)

        section = self._parse_summary(data)
        if is_disambiguation(section.summary):
            raise DisambiguationError(self.source_name, query)

        self._emit(logging.INFO, f"Successfully fetched summary for '{query}'")
        return section

    def _parse_summary(self, data: Any) -> WikipediaSection:
        if not isinstance(data, dict):
            raise self._schema_error("expected a JSON object")

        title = data.get("title")
        extract = data.get("extract")
        if not isinstance(title, str) or not isinstance(extract, str):
            raise self._schema_error("missing 'title' or 'extract'")

        try:
            page_url = data["content_urls"]["desktop"]["page"]
        except (KeyError, TypeError):
            page_url = None
        if not isinstance(page_url, str):
            raise self._schema_error("missing 'content_urls.desktop.page'")

        image_url = None
        thumbnail = data.get("thumbnail")
        if thumbnail is not None:
            if not isinstance(thumbnail, dict) or not isinstance(thumbnail.get("source"), str):
                raise self._schema_error("'thumbnail' has no 'source'")
            image_url = thumbnail["source"]

        return WikipediaSection.from_extract(title=title, extract=extract, url=page_url, image_url=image_url)


__all__ = ["DISAMBIGUATION_MARKER", "WikipediaClient", "is_disambiguation", "page_title"]
