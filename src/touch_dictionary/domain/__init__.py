"""Domain layer - the lookup result model."""

from .entities import (
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
