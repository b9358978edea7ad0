"""
Desktop-shell command bridge.

The desktop front end invokes these commands and receives JSON-ready dicts.
Window handling is delegated to whatever window object the shell provides
(anything with ``show()``, ``hide()`` and optionally ``set_focus()``).
"""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING, Any, Protocol

from touch_dictionary.application.lookup.service import lookup
from touch_dictionary.shared.exceptions import TouchDictionaryError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from touch_dictionary.application.lookup.service import LookupService

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Failure handed back to the shell; ``str(error)`` is the message it shows."""


class Window(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...


async def run_lookup_command(query: str, service: LookupService | None = None) -> dict[str, Any]:
    """
    Lookup command for the front end.

    Returns:
        The serialized LookupResult

    Raises:
        CommandError: Carrying the error string when the lookup fails
    """
    logger.info(f"Lookup command invoked for: {query}")
    try:
        result = await service.lookup(query) if service is not None else await lookup(query)
    except TouchDictionaryError as e:
        logger.error(f"Lookup failed for '{query}': {e}")
        raise CommandError(str(e)) from e

    logger.info(f"Successfully processed lookup for: {query}")
    return result.to_dict()


def get_initial_query(argv: Sequence[str]) -> list[str]:
    """Arguments the shell was started with, minus the program name."""
    return list(argv[1:])


class DesktopBridge:
    """Window and URL commands unrelated to the lookup core."""

    def __init__(
        self,
        window: Window | None = None,
        opener: Callable[[str], Any] = webbrowser.open,
    ) -> None:
        self._window = window
        self._opener = opener

    def show_window(self) -> bool:
        if self._window is None:
            return False
        try:
            self._window.show()
            if hasattr(self._window, "set_focus"):
                self._window.set_focus()
        except Exception as e:
            logger.error(f"Failed to show window: {e}")
            return False
        return True

    def close_window(self) -> bool:
        """Hide the window; the shell keeps running in the background."""
        logger.info("Closing window")
        if self._window is None:
            return False
        try:
            self._window.hide()
        except Exception as e:
            logger.error(f"Failed to hide window: {e}")
            return False
        return True

    def open_url(self, url: str) -> bool:
        logger.info(f"Opening URL: {url}")
        try:
            return bool(self._opener(url))
        except webbrowser.Error as e:
            logger.error(f"Failed to open URL {url}: {e}")
            return False


__all__ = ["CommandError", "DesktopBridge", "Window", "get_initial_query", "run_lookup_command"]
