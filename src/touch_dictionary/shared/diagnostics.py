"""
Source-tagged diagnostics.

Clients and the aggregator report progress and failures through a
``Diagnostics`` object instead of writing to a logger directly, so tests can
inject a recorder and assert on what was emitted.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

APP_TAG = "touchdictionary"


class Diagnostics(Protocol):
    """Severity-tagged emit operation."""

    def emit(self, level: int, source: str, message: str, *, exc_info: BaseException | None = None) -> None: ...


class LoggerDiagnostics:
    """Default diagnostics backed by the standard ``logging`` module."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def emit(self, level: int, source: str, message: str, *, exc_info: BaseException | None = None) -> None:
        self._logger.log(level, f"[{APP_TAG}] [{source}] {message}", exc_info=exc_info)


__all__ = ["APP_TAG", "Diagnostics", "LoggerDiagnostics"]
