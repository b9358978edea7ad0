"""
Application DI Container (dependency-injector).

Centralizes creation of the transport, source clients and lookup service.

Usage::

    from touch_dictionary.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(load_settings())

    service = container.lookup_service()

    # In tests - override any provider:
    container.transport.override(providers.Object(fake_transport))
"""

from __future__ import annotations

import logging
from typing import Any

from dependency_injector import containers, providers

from touch_dictionary.application.lookup.aggregator import SourceAggregator
from touch_dictionary.application.lookup.classifier import ContentClassifier
from touch_dictionary.application.lookup.service import LookupService
from touch_dictionary.infrastructure.http.transport import HttpxTransport
from touch_dictionary.infrastructure.sources.dictionary import FreeDictionaryClient
from touch_dictionary.infrastructure.sources.thesaurus import StubThesaurusClient
from touch_dictionary.infrastructure.sources.wikipedia import WikipediaClient
from touch_dictionary.shared.diagnostics import LoggerDiagnostics
from touch_dictionary.shared.settings import DEFAULT_SETTINGS, load_settings

logger = logging.getLogger(__name__)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for TouchDictionary.

    - ``transport``: shared httpx-backed transport (one per container)
    - ``dictionary_client`` / ``wikipedia_client`` / ``thesaurus_client``: sources
    - ``aggregator``: source dispatch and merging
    - ``lookup_service``: the public lookup contract
    """

    config = providers.Configuration()

    diagnostics = providers.Singleton(LoggerDiagnostics)

    transport = providers.Singleton(
        HttpxTransport,
        timeout=config.timeout,
    )

    dictionary_client = providers.Factory(
        FreeDictionaryClient,
        transport,
        base_url=config.dictionary_url,
        diagnostics=diagnostics,
    )

    wikipedia_client = providers.Factory(
        WikipediaClient,
        transport,
        base_url=config.wikipedia_url,
        user_agent=config.user_agent,
        diagnostics=diagnostics,
    )

    thesaurus_client = providers.Factory(
        StubThesaurusClient,
        diagnostics=diagnostics,
    )

    classifier = providers.Singleton(ContentClassifier)

    aggregator = providers.Factory(
        SourceAggregator,
        dictionary_client,
        wikipedia_client,
        thesaurus_client,
        diagnostics=diagnostics,
        concurrent=config.concurrent,
    )

    lookup_service = providers.Factory(
        LookupService,
        classifier=classifier,
        aggregator=aggregator,
    )


def create_container(settings: dict[str, Any] | None = None) -> ApplicationContainer:
    """Build a container from ``settings`` (merged over defaults) or the environment."""
    container = ApplicationContainer()
    container.config.from_dict({**DEFAULT_SETTINGS, **settings} if settings is not None else load_settings())
    return container


__all__ = ["ApplicationContainer", "create_container"]
