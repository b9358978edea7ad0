"""
Tests for SourceAggregator - source dispatch and partial-failure merging.
"""

import asyncio
import logging

import pytest

from touch_dictionary.application.lookup.aggregator import SOURCE_PLAN, SourceAggregator
from touch_dictionary.domain.entities.lookup import ContentType, ThesaurusSection
from touch_dictionary.infrastructure.http.transport import TransportError, TransportResponse
from touch_dictionary.infrastructure.sources.dictionary import FreeDictionaryClient
from touch_dictionary.infrastructure.sources.thesaurus import StubThesaurusClient
from touch_dictionary.infrastructure.sources.wikipedia import WikipediaClient
from touch_dictionary.shared.exceptions import (
    DisambiguationError,
    NotFoundError,
    SourceParseError,
    SourceUnavailableError,
)
from touch_dictionary.shared.settings import DICTIONARY_API_URL, WIKIPEDIA_SUMMARY_URL


@pytest.fixture(params=[True, False], ids=["concurrent", "sequential"])
def make_aggregator(request, fake_dictionary, fake_wikipedia, fake_thesaurus, diagnostics):
    def _make(dictionary=None, wikipedia=None, thesaurus=None):
        return SourceAggregator(
            dictionary or fake_dictionary,
            wikipedia or fake_wikipedia,
            thesaurus or fake_thesaurus,
            diagnostics=diagnostics,
            concurrent=request.param,
        )

    return _make


class TestDispatch:
    def test_plan(self):
        assert SOURCE_PLAN[ContentType.WORD] == ("dictionary", "wikipedia")
        assert SOURCE_PLAN[ContentType.ENTITY] == ("wikipedia",)
        assert SOURCE_PLAN[ContentType.MIXED] == ("dictionary", "wikipedia", "thesaurus")

    async def test_word_queries_dictionary_and_wikipedia(self, make_aggregator, fake_dictionary, fake_wikipedia, fake_thesaurus):
        sections = await make_aggregator().aggregate("hello", ContentType.WORD)

        assert fake_dictionary.calls == ["hello"]
        assert fake_wikipedia.calls == ["hello"]
        assert fake_thesaurus.call_count == 0
        assert sections.definitions is not None
        assert len(sections.definitions) == 1
        assert sections.wikipedia is not None
        assert sections.thesaurus is None

    async def test_entity_never_calls_dictionary(self, make_aggregator, fake_dictionary, fake_wikipedia, fake_thesaurus):
        sections = await make_aggregator().aggregate("paris", ContentType.ENTITY)

        assert fake_dictionary.call_count == 0
        assert fake_thesaurus.call_count == 0
        assert fake_wikipedia.call_count == 1
        assert sections.definitions is None
        assert sections.wikipedia is not None

    async def test_mixed_queries_all_sources(self, make_aggregator, fake_dictionary, fake_wikipedia, fake_thesaurus):
        await make_aggregator().aggregate("hello", ContentType.MIXED)

        assert fake_dictionary.call_count == 1
        assert fake_wikipedia.call_count == 1
        assert fake_thesaurus.call_count == 1

    async def test_mixed_populates_non_empty_thesaurus(self, make_aggregator, make_source):
        thesaurus = make_source("thesaurus", result=ThesaurusSection(synonyms=("hi", "greetings")))
        sections = await make_aggregator(thesaurus=thesaurus).aggregate("hello", ContentType.MIXED)
        assert sections.thesaurus is not None
        assert sections.thesaurus.synonyms == ("hi", "greetings")

    async def test_stub_thesaurus_leaves_section_absent(self, make_aggregator):
        sections = await make_aggregator(thesaurus=StubThesaurusClient()).aggregate("hello", ContentType.MIXED)
        assert sections.thesaurus is None


class TestPartialFailure:
    async def test_empty_definitions_absent_with_warning(self, make_aggregator, make_source, diagnostics):
        dictionary = make_source("dictionary", result=[])

        sections = await make_aggregator(dictionary=dictionary).aggregate("hello", ContentType.WORD)

        assert sections.definitions is None
        assert sections.wikipedia is not None
        assert any("No definitions found" in m for m in diagnostics.messages(level=logging.WARNING, source="dictionary"))

    async def test_dictionary_error_does_not_block_wikipedia(self, make_aggregator, make_source, diagnostics):
        dictionary = make_source("dictionary", error=SourceUnavailableError("dictionary", "boom", status_code=500))

        sections = await make_aggregator(dictionary=dictionary).aggregate("hello", ContentType.WORD)

        assert sections.definitions is None
        assert sections.wikipedia is not None
        errors = diagnostics.messages(level=logging.ERROR, source="dictionary")
        assert errors == ["Failed to fetch definitions for 'hello': boom"]

    async def test_wikipedia_not_found_logged_as_info(self, make_aggregator, make_source, diagnostics):
        wikipedia = make_source("wikipedia", error=NotFoundError("wikipedia", "hello"))

        sections = await make_aggregator(wikipedia=wikipedia).aggregate("hello", ContentType.WORD)

        assert sections.wikipedia is None
        assert sections.definitions is not None
        assert diagnostics.messages(level=logging.INFO, source="wikipedia")
        assert diagnostics.messages(level=logging.ERROR) == []

    async def test_disambiguation_logged_as_warning(self, make_aggregator, make_source, diagnostics):
        wikipedia = make_source("wikipedia", error=DisambiguationError("wikipedia", "mercury"))

        sections = await make_aggregator(wikipedia=wikipedia).aggregate("mercury", ContentType.ENTITY)

        assert sections.wikipedia is None
        assert diagnostics.messages(level=logging.WARNING, source="wikipedia")

    async def test_parse_error_logged_as_error(self, make_aggregator, make_source, diagnostics):
        wikipedia = make_source("wikipedia", error=SourceParseError("wikipedia", "bad"))
        await make_aggregator(wikipedia=wikipedia).aggregate("hello", ContentType.ENTITY)
        assert diagnostics.messages(level=logging.ERROR, source="wikipedia")

    async def test_unexpected_exception_is_contained(self, make_aggregator, make_source, diagnostics):
        dictionary = make_source("dictionary", error=RuntimeError("bug"))
        wikipedia = make_source("wikipedia", error=ValueError("bug"))

        sections = await make_aggregator(dictionary=dictionary, wikipedia=wikipedia).aggregate("hello", ContentType.WORD)

        assert sections.is_empty
        assert diagnostics.messages(level=logging.ERROR, source="dictionary") == [
            "Failed to fetch definitions for 'hello': RuntimeError('bug')"
        ]
        assert len(diagnostics.messages(level=logging.ERROR)) == 2
        assert [type(e) for e in diagnostics.exc_infos] == [RuntimeError, ValueError]

    async def test_everything_fails(self, make_aggregator, make_source):
        dictionary = make_source("dictionary", error=SourceUnavailableError("dictionary"))
        wikipedia = make_source("wikipedia", error=SourceUnavailableError("wikipedia"))
        thesaurus = make_source("thesaurus", error=SourceUnavailableError("thesaurus"))

        sections = await make_aggregator(dictionary, wikipedia, thesaurus).aggregate("hello", ContentType.MIXED)

        assert sections.is_empty


class TestSingleFailureReport:
    """A failing source produces one diagnostic, emitted by the aggregator."""

    @pytest.mark.parametrize("concurrent", [True, False], ids=["concurrent", "sequential"])
    async def test_real_clients_report_once(self, make_transport, diagnostics, wikipedia_payload, concurrent):
        transport = make_transport(
            {
                f"{DICTIONARY_API_URL}/hello": TransportResponse(500, "oops"),
                f"{WIKIPEDIA_SUMMARY_URL}/hello": TransportError("Connection failed"),
            }
        )
        aggregator = SourceAggregator(
            FreeDictionaryClient(transport, diagnostics=diagnostics),
            WikipediaClient(transport, diagnostics=diagnostics),
            StubThesaurusClient(diagnostics=diagnostics),
            diagnostics=diagnostics,
            concurrent=concurrent,
        )

        sections = await aggregator.aggregate("hello", ContentType.WORD)

        assert sections.is_empty
        assert diagnostics.messages(level=logging.ERROR, source="dictionary") == [
            "Failed to fetch definitions for 'hello': Free Dictionary API returned status: 500"
        ]
        assert diagnostics.messages(level=logging.ERROR, source="wikipedia") == [
            "Failed to fetch Wikipedia summary for 'hello': Failed to connect to Wikipedia API: Connection failed"
        ]

    async def test_not_found_reported_once(self, make_transport, diagnostics):
        transport = make_transport({})
        aggregator = SourceAggregator(
            FreeDictionaryClient(transport, diagnostics=diagnostics),
            WikipediaClient(transport, diagnostics=diagnostics),
            StubThesaurusClient(diagnostics=diagnostics),
            diagnostics=diagnostics,
        )

        await aggregator.aggregate("xyzzy", ContentType.WORD)

        wikipedia_records = [m for m in diagnostics.messages(source="wikipedia") if "Fetching" not in m]
        assert wikipedia_records == ["Failed to fetch Wikipedia summary for 'xyzzy': No entry found for 'xyzzy'"]
        assert diagnostics.messages(source="dictionary", level=logging.WARNING) == ["No definitions found for 'xyzzy'"]


class TestConcurrency:
    async def test_sources_overlap_when_concurrent(self, make_source, wikipedia_section, definition_sections):
        both_started = asyncio.Event()
        running = 0

        def overlapping(source):
            async def fetch(query):
                nonlocal running
                running += 1
                if running == 2:
                    both_started.set()
                await asyncio.wait_for(both_started.wait(), timeout=1.0)
                return source.result

            source.fetch = fetch
            return source

        aggregator = SourceAggregator(
            overlapping(make_source("dictionary", result=definition_sections)),
            overlapping(make_source("wikipedia", result=wikipedia_section)),
            make_source("thesaurus", result=ThesaurusSection()),
            concurrent=True,
        )

        sections = await aggregator.aggregate("hello", ContentType.WORD)

        assert both_started.is_set()
        assert sections.definitions is not None
        assert sections.wikipedia is not None
