"""
SourceAggregator - decides which sources to query and merges their output.

Dispatch matrix:

    ContentType │ dictionary │ wikipedia │ thesaurus
    ────────────┼────────────┼───────────┼──────────
    WORD        │     ✓      │     ✓     │
    ENTITY      │            │     ✓     │
    MIXED       │     ✓      │     ✓     │     ✓

Every source call is independent. A failing source is logged with its
severity and leaves its section absent; ``aggregate`` itself never raises.

Example:
    >>> aggregator = SourceAggregator(dictionary, wikipedia, thesaurus)
    >>> sections = await aggregator.aggregate("hello", ContentType.WORD)
    >>> sections.definitions is not None
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from touch_dictionary.domain.entities.lookup import ContentType, Sections
from touch_dictionary.shared.async_utils import gather_with_errors
from touch_dictionary.shared.diagnostics import LoggerDiagnostics
from touch_dictionary.shared.exceptions import SourceError

if TYPE_CHECKING:
    from touch_dictionary.application.lookup.ports import (
        DictionarySource,
        EncyclopediaSource,
        ThesaurusSource,
    )
    from touch_dictionary.shared.diagnostics import Diagnostics

DICTIONARY = "dictionary"
WIKIPEDIA = "wikipedia"
THESAURUS = "thesaurus"

SOURCE_PLAN: dict[ContentType, tuple[str, ...]] = {
    ContentType.WORD: (DICTIONARY, WIKIPEDIA),
    ContentType.ENTITY: (WIKIPEDIA,),
    ContentType.MIXED: (DICTIONARY, WIKIPEDIA, THESAURUS),
}

_FAILURE_MESSAGES = {
    DICTIONARY: "Failed to fetch definitions for '{query}': {error}",
    WIKIPEDIA: "Failed to fetch Wikipedia summary for '{query}': {error}",
    THESAURUS: "Failed to fetch thesaurus data for '{query}': {error}",
}


class SourceAggregator:
    """
    Aggregates source clients into ``Sections``.

    Args:
        dictionary: Dictionary source (definitions)
        encyclopedia: Encyclopedia source (summary)
        thesaurus: Thesaurus source
        diagnostics: Where failures and empty results are reported
        concurrent: Run the planned source calls in parallel
    """

    def __init__(
        self,
        dictionary: DictionarySource,
        encyclopedia: EncyclopediaSource,
        thesaurus: ThesaurusSource,
        *,
        diagnostics: Diagnostics | None = None,
        concurrent: bool = True,
    ) -> None:
        self._sources: dict[str, Any] = {
            DICTIONARY: dictionary,
            WIKIPEDIA: encyclopedia,
            THESAURUS: thesaurus,
        }
        self._diagnostics = diagnostics or LoggerDiagnostics()
        self._concurrent = concurrent

    @staticmethod
    def plan(content_type: ContentType) -> tuple[str, ...]:
        """Source names consulted for a classification, in reference order."""
        return SOURCE_PLAN[content_type]

    async def aggregate(self, query: str, content_type: ContentType) -> Sections:
        plan = self.plan(content_type)

        if self._concurrent and len(plan) > 1:
            values = await gather_with_errors(*(self._sources[name].fetch(query) for name in plan))
        else:
            values = [await self._fetch_one(name, query) for name in plan]

        outcomes = {}
        for name, value in zip(plan, values, strict=True):
            if isinstance(value, Exception):
                self._report_failure(name, query, value)
                value = None
            outcomes[name] = value
        return self._build_sections(query, outcomes)

    async def _fetch_one(self, name: str, query: str) -> Any:
        """Call one source, returning its exception instead of raising."""
        try:
            return await self._sources[name].fetch(query)
        except Exception as e:
            return e

    def _report_failure(self, name: str, query: str, error: Exception) -> None:
        """The single diagnostic emitted for a failed source."""
        if isinstance(error, SourceError):
            message = _FAILURE_MESSAGES[name].format(query=query, error=error)
            self._diagnostics.emit(error.severity.log_level, name, message)
        else:
            message = _FAILURE_MESSAGES[name].format(query=query, error=repr(error))
            self._diagnostics.emit(logging.ERROR, name, message, exc_info=error)

    def _build_sections(self, query: str, outcomes: dict[str, Any]) -> Sections:
        definitions = None
        if DICTIONARY in outcomes:
            found = outcomes[DICTIONARY]
            if found:
                definitions = tuple(found)
            elif found is not None:
                self._diagnostics.emit(logging.WARNING, DICTIONARY, f"No definitions found for '{query}'")

        thesaurus = outcomes.get(THESAURUS)
        if thesaurus is not None and thesaurus.is_empty:
            thesaurus = None

        return Sections(
            definitions=definitions,
            wikipedia=outcomes.get(WIKIPEDIA),
            thesaurus=thesaurus,
        )


__all__ = ["SOURCE_PLAN", "SourceAggregator"]
