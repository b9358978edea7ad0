"""
Settings - environment-driven configuration.

The returned mapping is fed to ``ApplicationContainer.config.from_dict``.

Environment Variables:
    TOUCHDICTIONARY_DICTIONARY_URL: Dictionary entries endpoint
    TOUCHDICTIONARY_WIKIPEDIA_URL: Wikipedia page-summary endpoint
    TOUCHDICTIONARY_USER_AGENT: User-Agent sent to Wikipedia
    TOUCHDICTIONARY_TIMEOUT: Request timeout in seconds (default: 10)
    TOUCHDICTIONARY_CONCURRENT: Fetch sources in parallel (default: true)
    TOUCHDICTIONARY_LOG_LEVEL: Logging level for the CLI (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from touch_dictionary.shared.exceptions import ConfigurationError, ErrorContext

if TYPE_CHECKING:
    from collections.abc import Mapping

DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary"
DEFAULT_USER_AGENT = "TouchDictionary/0.1.0 (https://github.com/touchdictionary/touchdictionary)"

DEFAULT_SETTINGS: dict[str, Any] = {
    "dictionary_url": DICTIONARY_API_URL,
    "wikipedia_url": WIKIPEDIA_SUMMARY_URL,
    "user_agent": DEFAULT_USER_AGENT,
    "timeout": 10.0,
    "concurrent": True,
    "log_level": "WARNING",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {value!r}",
        context=ErrorContext(input_value=value, suggestion="Use 1/0, true/false, yes/no or on/off"),
    )


def _parse_timeout(name: str, value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        timeout = -1.0
    if timeout <= 0:
        raise ConfigurationError(
            f"{name} must be a positive number of seconds, got {value!r}",
            context=ErrorContext(input_value=value),
        )
    return timeout


def _parse_log_level(name: str, value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} is not a logging level: {value!r}", context=ErrorContext(input_value=value))
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build settings from defaults overridden by environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Raises:
        ConfigurationError: When a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    settings = dict(DEFAULT_SETTINGS)

    if value := env.get("TOUCHDICTIONARY_DICTIONARY_URL"):
        settings["dictionary_url"] = value.rstrip("/")
    if value := env.get("TOUCHDICTIONARY_WIKIPEDIA_URL"):
        settings["wikipedia_url"] = value.rstrip("/")
    if value := env.get("TOUCHDICTIONARY_USER_AGENT"):
        settings["user_agent"] = value
    if value := env.get("TOUCHDICTIONARY_TIMEOUT"):
        settings["timeout"] = _parse_timeout("TOUCHDICTIONARY_TIMEOUT", value)
    if value := env.get("TOUCHDICTIONARY_CONCURRENT"):
        settings["concurrent"] = _parse_bool("TOUCHDICTIONARY_CONCURRENT", value)
    if value := env.get("TOUCHDICTIONARY_LOG_LEVEL"):
        settings["log_level"] = _parse_log_level("TOUCHDICTIONARY_LOG_LEVEL", value)

    return settings


__all__ = [
    "DEFAULT_SETTINGS",
    "DEFAULT_USER_AGENT",
    "DICTIONARY_API_URL",
    "WIKIPEDIA_SUMMARY_URL",
    "load_settings",
]
