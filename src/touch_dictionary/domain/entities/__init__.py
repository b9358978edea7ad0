"""Domain entities."""

from .lookup import (
    ContentType,
    Definition,
    DefinitionSection,
    LookupResult,
    Sections,
    ThesaurusSection,
    WikipediaSection,
)

__all__ = [
    "ContentType",
    "Definition",
    "DefinitionSection",
    "LookupResult",
    "Sections",
    "ThesaurusSection",
    "WikipediaSection",
]
