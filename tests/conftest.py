"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from touch_dictionary.domain.entities.lookup import (
    Definition,
    DefinitionSection,
    ThesaurusSection,
    WikipediaSection,
)
from touch_dictionary.infrastructure.http.transport import TransportResponse

# ============================================================
# Diagnostics / Transport Fakes
# ============================================================


class RecordingDiagnostics:
    """Diagnostics that keep every emitted record for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str, str]] = []
        self.exc_infos: list[BaseException] = []

    def emit(self, level: int, source: str, message: str, *, exc_info: BaseException | None = None) -> None:
        self.records.append((level, source, message))
        if exc_info is not None:
            self.exc_infos.append(exc_info)

    def messages(self, *, level: int | None = None, source: str | None = None) -> list[str]:
        return [
            message
            for rec_level, rec_source, message in self.records
            if (level is None or rec_level == level) and (source is None or rec_source == source)
        ]


class FakeTransport:
    """
    Transport answering from a URL table.

    Values are a TransportResponse, an exception to raise, or a JSON payload
    served with status 200. Unknown URLs answer 404.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> TransportResponse:
        self.calls.append((url, headers or {}))
        answer = self.responses.get(url, TransportResponse(404, ""))
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, TransportResponse):
            return answer
        return TransportResponse(status_code=200, body=json.dumps(answer))

    async def aclose(self) -> None:
        self.closed = True


# ============================================================
# Fake Source Clients
# ============================================================


class FakeSource:
    """Source client returning a canned value or raising a canned error."""

    def __init__(self, source_name: str, result: Any = None, error: Exception | None = None) -> None:
        self.source_name = source_name
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, query: str) -> Any:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def diagnostics():
    return RecordingDiagnostics()


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_source():
    """Factory for FakeSource instances."""
    return FakeSource


@pytest.fixture
def definition_sections():
    return [
        DefinitionSection(
            source="Free Dictionary API",
            definitions=(
                Definition(
                    word="hello",
                    part_of_speech="noun",
                    definition='"Hello!" or an equivalent greeting.',
                    example="She gave me a cheery hello.",
                ),
            ),
        )
    ]


@pytest.fixture
def wikipedia_section():
    return WikipediaSection.from_extract(
        title="Hello",
        extract="Hello is a salutation or greeting in the English language.\nIt is first attested in writing from 1826.",
        url="https://en.wikipedia.org/wiki/Hello",
        image_url="https://upload.wikimedia.org/hello.jpg",
    )


@pytest.fixture
def fake_dictionary(definition_sections):
    return FakeSource("dictionary", result=definition_sections)


@pytest.fixture
def fake_wikipedia(wikipedia_section):
    return FakeSource("wikipedia", result=wikipedia_section)


@pytest.fixture
def fake_thesaurus():
    return FakeSource("thesaurus", result=ThesaurusSection())


# ============================================================
# Mock API Payloads
# ============================================================


@pytest.fixture
def dictionary_payload():
    """Response from api.dictionaryapi.dev for 'hello'."""
    return [
        {
            "word": "hello",
            "phonetics": [{"text": "/həˈləʊ/", "audio": ""}],
            "meanings": [
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {
                            "definition": '"Hello!" or an equivalent greeting.',
                            "example": "She gave me a cheery hello.",
                            "synonyms": [],
                            "antonyms": [],
                        }
                    ],
                },
                {
                    "partOfSpeech": "verb",
                    "definitions": [{"definition": 'To greet with "hello".'}],
                },
            ],
        }
    ]


@pytest.fixture
def wikipedia_payload():
    """Response from the Wikipedia page-summary endpoint for 'hello'."""
    return {
        "title": "Hello",
        "extract": "Hello is a salutation or greeting in the English language.\n\n  It is first attested in writing from 1826.  ",
        "thumbnail": {"source": "https://upload.wikimedia.org/hello.jpg", "width": 320, "height": 213},
        "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Hello"}},
    }
