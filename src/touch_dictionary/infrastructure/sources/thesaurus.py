"""
Thesaurus placeholder.

No free thesaurus API is integrated yet. The stub satisfies the same
``ThesaurusSource`` interface a real client would, so the aggregator does not
change when one is plugged in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from touch_dictionary.domain.entities.lookup import ThesaurusSection
from touch_dictionary.shared.diagnostics import LoggerDiagnostics

if TYPE_CHECKING:
    from touch_dictionary.shared.diagnostics import Diagnostics


class StubThesaurusClient:
    """Always succeeds with an empty ThesaurusSection."""

    source_name = "thesaurus"

    def __init__(self, *, diagnostics: Diagnostics | None = None) -> None:
        self._diagnostics = diagnostics or LoggerDiagnostics()

    async def fetch(self, query: str) -> ThesaurusSection:
        self._diagnostics.emit(
            logging.INFO,
            self.source_name,
            "Thesaurus API not yet implemented, returning empty data",
        )
        return ThesaurusSection()


__all__ = ["StubThesaurusClient"]
