"""
TouchDictionary - word and phrase lookup across reference APIs.

Aggregates the Free Dictionary API and Wikipedia page summaries into one
structured result.

Usage:
    from touch_dictionary import lookup

    result = await lookup("serendipity")
    for section in result.sections.definitions or ():
        for definition in section.definitions:
            print(definition.part_of_speech, definition.definition)

Features:
    - Query normalization and Word / Entity classification
    - Independent, failure-tolerant source clients
    - Injectable HTTP transport and diagnostics
    - CLI (``touchdictionary``) and desktop-shell command bridge
"""

from .application.lookup import ContentClassifier, LookupService, SourceAggregator, lookup, lookup_sync
from .domain import (
    ContentType,
    Definition,
    DefinitionSection,
    LookupResult,
    Sections,
    ThesaurusSection,
    WikipediaSection,
)
from .shared.exceptions import EmptyQueryError, SourceError, TouchDictionaryError

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "lookup",
    "lookup_sync",
    "LookupService",
    # Pipeline
    "ContentClassifier",
    "SourceAggregator",
    # Result model
    "ContentType",
    "Definition",
    "DefinitionSection",
    "LookupResult",
    "Sections",
    "ThesaurusSection",
    "WikipediaSection",
    # Errors
    "EmptyQueryError",
    "SourceError",
    "TouchDictionaryError",
]
