"""
Lookup Result Model - merged output of one lookup.

Architecture Decision:
    Frozen dataclasses, created fresh per lookup and never mutated.
    Collections are tuples so that immutability holds all the way down.

    A ``Sections`` field is ``None`` when its source failed or returned
    nothing. It is never present-but-empty.

Example:
    >>> result = LookupResult(
    ...     query="hello",
    ...     content_type=ContentType.WORD,
    ...     sections=Sections(),
    ... )
    >>> result.to_dict()["content_type"]
    'Word'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ContentType(Enum):
    """
    Classification of a query, deciding which sources are consulted.

    WORD: dictionary + encyclopedia
    ENTITY: encyclopedia only
    MIXED: every source (never produced by the current classifier)
    """

    WORD = "Word"
    ENTITY = "Entity"
    MIXED = "Mixed"


@dataclass(frozen=True, slots=True)
class Definition:
    """A single sense of a word."""

    word: str
    definition: str
    part_of_speech: str | None = None
    example: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "part_of_speech": self.part_of_speech,
            "definition": self.definition,
            "example": self.example,
        }


@dataclass(frozen=True, slots=True)
class DefinitionSection:
    """Definitions from one dictionary entry."""

    source: str
    definitions: tuple[Definition, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "definitions": [d.to_dict() for d in self.definitions],
        }


@dataclass(frozen=True, slots=True)
class WikipediaSection:
    """Encyclopedia summary of the query."""

    title: str
    summary: str
    url: str
    paragraphs: tuple[str, ...] = ()
    image_url: str | None = None

    @classmethod
    def from_extract(
        cls,
        title: str,
        extract: str,
        url: str,
        image_url: str | None = None,
    ) -> WikipediaSection:
        """Build a section, splitting the extract into trimmed non-blank paragraphs."""
        paragraphs = tuple(line.strip() for line in extract.split("\n") if line.strip())
        return cls(title=title, summary=extract, url=url, paragraphs=paragraphs, image_url=image_url)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "paragraphs": list(self.paragraphs),
            "image_url": self.image_url,
            "url": self.url,
        }


@dataclass(frozen=True, slots=True)
class ThesaurusSection:
    """Synonyms, antonyms and related terms."""

    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()
    related_terms: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.synonyms or self.antonyms or self.related_terms)

    def to_dict(self) -> dict[str, Any]:
        return {
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
            "related_terms": list(self.related_terms),
        }


@dataclass(frozen=True, slots=True)
class Sections:
    """Optional-valued bag of result sections."""

    definitions: tuple[DefinitionSection, ...] | None = None
    wikipedia: WikipediaSection | None = None
    thesaurus: ThesaurusSection | None = None

    @property
    def is_empty(self) -> bool:
        """True when no source produced usable data."""
        return self.definitions is None and self.wikipedia is None and self.thesaurus is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "definitions": None if self.definitions is None else [s.to_dict() for s in self.definitions],
            "wikipedia": None if self.wikipedia is None else self.wikipedia.to_dict(),
            "thesaurus": None if self.thesaurus is None else self.thesaurus.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class LookupResult:
    """
    Merged result of one lookup.

    ``query`` always holds the normalized query, never the raw user input.
    """

    query: str
    content_type: ContentType
    sections: Sections = field(default_factory=Sections)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "query": self.query,
            "content_type": self.content_type.value,
            "sections": self.sections.to_dict(),
        }


__all__ = [
    "ContentType",
    "Definition",
    "DefinitionSection",
    "LookupResult",
    "Sections",
    "ThesaurusSection",
    "WikipediaSection",
]
