"""Interfaces the aggregator needs from source clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from touch_dictionary.domain.entities.lookup import (
        DefinitionSection,
        ThesaurusSection,
        WikipediaSection,
    )


class DictionarySource(Protocol):
    source_name: str

    async def fetch(self, query: str) -> list[DefinitionSection]: ...


class EncyclopediaSource(Protocol):
    source_name: str

    async def fetch(self, query: str) -> WikipediaSection: ...


class ThesaurusSource(Protocol):
    source_name: str

    async def fetch(self, query: str) -> ThesaurusSection: ...


__all__ = ["DictionarySource", "EncyclopediaSource", "ThesaurusSource"]
