"""
Free Dictionary API Integration

API Documentation: https://dictionaryapi.dev/

Response shape (one element per entry):
    [{"word": "hello",
      "phonetics": [...],
      "meanings": [{"partOfSpeech": "noun",
                    "definitions": [{"definition": "...", "example": "...",
                                     "synonyms": [...], "antonyms": [...]}]}]}]

A 404 means "no entries" and is not an error.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import TYPE_CHECKING, Any

from touch_dictionary.domain.entities.lookup import Definition, DefinitionSection
from touch_dictionary.infrastructure.sources.base_client import _CONTINUE, BaseSourceClient
from touch_dictionary.shared.settings import DICTIONARY_API_URL

if TYPE_CHECKING:
    from touch_dictionary.infrastructure.http.transport import HttpTransport, TransportResponse
    from touch_dictionary.shared.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

SOURCE_LABEL = "Free Dictionary API"


class FreeDictionaryClient(BaseSourceClient):
    """
    Dictionary client for api.dictionaryapi.dev.

    Usage:
        client = FreeDictionaryClient(transport)
        sections = await client.fetch("hello")
    """

    source_name = "dictionary"
    source_label = SOURCE_LABEL

    def __init__(
        self,
        transport: HttpTransport,
        *,
        base_url: str = DICTIONARY_API_URL,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        super().__init__(transport, base_url=base_url, diagnostics=diagnostics)

    def _handle_expected_status(self, response: TransportResponse, url: str) -> Any:
        """Handle 404 (no definitions)."""
        if response.status_code == 404:
            return []
        return _CONTINUE

    async def fetch(self, query: str) -> list[DefinitionSection]:
        """
        Fetch definitions for a normalized query.

        Returns:
            One DefinitionSection per dictionary entry; empty when nothing was found

        Raises:
            SourceUnavailableError: Transport failure or unexpected status
            SourceParseError: Body does not match the entry schema
        """
        self._emit(logging.INFO, f"Fetching definitions for '{query}' from {SOURCE_LABEL}")

        url = f"{self._base_url}/{urllib.parse.quote(query, safe='')}"
        data = await self._make_request(url)

        if data == []:
            return []

        sections = self._parse_entries(data)
        total = sum(len(s.definitions) for s in sections)
        self._emit(logging.INFO, f"Successfully fetched {total} definitions for '{query}'")
        return sections

    def _parse_entries(self, data: Any) -> list[DefinitionSection]:
        if not isinstance(data, list):
            raise self._schema_error("expected a list of entries")

        sections = []
        for entry in data:
            if not isinstance(entry, dict) or not isinstance(entry.get("word"), str):
                raise self._schema_error("entry without a 'word'")
            meanings = entry.get("meanings")
            if not isinstance(meanings, list):
                raise self._schema_error(f"entry '{entry['word']}' has no 'meanings' list")

            definitions = []
            for meaning in meanings:
                definitions.extend(self._parse_meaning(entry["word"], meaning))
            sections.append(DefinitionSection(source=SOURCE_LABEL, definitions=tuple(definitions)))
        return sections

    def _parse_meaning(self, word: str, meaning: Any) -> list[Definition]:
        if not isinstance(meaning, dict) or not isinstance(meaning.get("definitions"), list):
            raise self._schema_error(f"meaning of '{word}' has no 'definitions' list")

        part_of_speech = meaning.get("partOfSpeech", meaning.get("part_of_speech")) or None
        if part_of_speech is not None and not isinstance(part_of_speech, str):
            raise self._schema_error(f"part of speech of '{word}' is not a string")

        definitions = []
        for item in meaning["definitions"]:
            if not isinstance(item, dict) or not isinstance(item.get("definition"), str):
                raise self._schema_error(f"definition of '{word}' is missing its text")
            example = item.get("example")
            definitions.append(
                Definition(
                    word=word,
                    part_of_speech=part_of_speech,
                    definition=item["definition"],
                    example=example if isinstance(example, str) else None,
                )
            )
        return definitions


__all__ = ["FreeDictionaryClient", "SOURCE_LABEL"]
