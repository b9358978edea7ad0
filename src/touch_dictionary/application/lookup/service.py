"""
Lookup entry point.

    raw query ──► require_query ──► normalized query ──┐
        │                                              ▼
        └────────► ContentClassifier ──► SourceAggregator ──► LookupResult

The raw query is kept until classification so the capitalization signal
survives; the result only ever carries the normalized form.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from touch_dictionary.application.lookup.normalizer import require_query
from touch_dictionary.domain.entities.lookup import LookupResult

if TYPE_CHECKING:
    from touch_dictionary.application.lookup.aggregator import SourceAggregator
    from touch_dictionary.application.lookup.classifier import ContentClassifier

logger = logging.getLogger(__name__)


class LookupService:
    """The single lookup contract shared by the CLI and the desktop bridge."""

    def __init__(self, classifier: ContentClassifier, aggregator: SourceAggregator) -> None:
        self._classifier = classifier
        self._aggregator = aggregator

    async def lookup(self, raw_query: str) -> LookupResult:
        """
        Look up a word or phrase.

        Raises:
            EmptyQueryError: When the query is blank after normalization.
                No source is contacted in that case.
        """
        query = require_query(raw_query)
        content_type = self._classifier.classify(raw_query)
        logger.debug(f"Classified '{query}' as {content_type.value}")

        sections = await self._aggregator.aggregate(query, content_type)
        return LookupResult(query=query, content_type=content_type, sections=sections)


async def lookup(raw_query: str, *, settings: dict[str, Any] | None = None) -> LookupResult:
    """
    One-shot lookup with the default wiring.

    Builds a container from ``settings`` (environment settings by default),
    performs the lookup and closes the HTTP transport.
    """
    from touch_dictionary.container import create_container

    container = create_container(settings)
    try:
        return await container.lookup_service().lookup(raw_query)
    finally:
        await container.transport().aclose()


def lookup_sync(raw_query: str, *, settings: dict[str, Any] | None = None) -> LookupResult:
    """Blocking wrapper around ``lookup`` for synchronous callers."""
    return asyncio.run(lookup(raw_query, settings=settings))


__all__ = ["LookupService", "lookup", "lookup_sync"]
