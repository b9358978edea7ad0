"""Tests for environment settings and the DI container."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from dependency_injector import providers

from touch_dictionary.application.lookup.aggregator import SourceAggregator
from touch_dictionary.application.lookup.service import LookupService
from touch_dictionary.container import ApplicationContainer, create_container
from touch_dictionary.infrastructure.http.transport import HttpxTransport
from touch_dictionary.infrastructure.sources.dictionary import FreeDictionaryClient
from touch_dictionary.infrastructure.sources.thesaurus import StubThesaurusClient
from touch_dictionary.infrastructure.sources.wikipedia import WikipediaClient
from touch_dictionary.shared.exceptions import ConfigurationError
from touch_dictionary.shared.settings import DEFAULT_SETTINGS, load_settings

# ============================================================================
# Settings
# ============================================================================


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings({}) == DEFAULT_SETTINGS

    def test_overrides(self):
        settings = load_settings(
            {
                "TOUCHDICTIONARY_DICTIONARY_URL": "http://dict.test/",
                "TOUCHDICTIONARY_WIKIPEDIA_URL": "http://wiki.test",
                "TOUCHDICTIONARY_USER_AGENT": "Test/1.0",
                "TOUCHDICTIONARY_TIMEOUT": "2.5",
                "TOUCHDICTIONARY_CONCURRENT": "off",
                "TOUCHDICTIONARY_LOG_LEVEL": "debug",
            }
        )
        assert settings == {
            "dictionary_url": "http://dict.test",
            "wikipedia_url": "http://wiki.test",
            "user_agent": "Test/1.0",
            "timeout": 2.5,
            "concurrent": False,
            "log_level": "DEBUG",
        }

    @pytest.mark.parametrize("value", ["0", "-1", "soon"])
    def test_invalid_timeout(self, value):
        with pytest.raises(ConfigurationError, match="TOUCHDICTIONARY_TIMEOUT"):
            load_settings({"TOUCHDICTIONARY_TIMEOUT": value})

    def test_invalid_bool(self):
        with pytest.raises(ConfigurationError, match="TOUCHDICTIONARY_CONCURRENT"):
            load_settings({"TOUCHDICTIONARY_CONCURRENT": "maybe"})

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            load_settings({"TOUCHDICTIONARY_LOG_LEVEL": "LOUD"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TOUCHDICTIONARY_USER_AGENT", "Env/2.0")
        assert load_settings()["user_agent"] == "Env/2.0"


# ============================================================================
# DI Container
# ============================================================================


class TestApplicationContainer:
    def test_container_creation(self) -> None:
        container = ApplicationContainer()
        container.config.from_dict(DEFAULT_SETTINGS)
        assert container.config.timeout() == 10.0
        assert container.config.concurrent() is True

    def test_providers_build_real_objects(self) -> None:
        container = create_container({})
        assert isinstance(container.transport(), HttpxTransport)
        assert isinstance(container.dictionary_client(), FreeDictionaryClient)
        assert isinstance(container.wikipedia_client(), WikipediaClient)
        assert isinstance(container.thesaurus_client(), StubThesaurusClient)
        assert isinstance(container.aggregator(), SourceAggregator)
        assert isinstance(container.lookup_service(), LookupService)

    def test_transport_singleton(self) -> None:
        container = create_container({})
        assert container.transport() is container.transport()

    def test_separate_containers_do_not_share_transport(self) -> None:
        assert create_container({}).transport() is not create_container({}).transport()

    def test_settings_flow_into_clients(self) -> None:
        container = create_container({"wikipedia_url": "http://wiki.test", "user_agent": "Test/1.0"})
        client = container.wikipedia_client()
        assert client._base_url == "http://wiki.test"
        assert client._headers["User-Agent"] == "Test/1.0"

    def test_override_provider(self) -> None:
        container = create_container({})
        mock_transport = MagicMock()
        container.transport.override(providers.Object(mock_transport))

        assert container.transport() is mock_transport
        assert container.dictionary_client()._transport is mock_transport

        container.transport.reset_override()
        assert container.transport() is not mock_transport

    def test_environment_settings_when_none(self, monkeypatch) -> None:
        monkeypatch.setenv("TOUCHDICTIONARY_DICTIONARY_URL", "http://env-dict.test")
        container = create_container()
        assert container.dictionary_client()._base_url == "http://env-dict.test"
