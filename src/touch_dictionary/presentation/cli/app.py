"""
TouchDictionary command-line interface.

Usage:
    touchdictionary <word...>          # look up the joined words
    touchdictionary --selection        # look up the primary selection
    touchdictionary --json serendipity # print the result as JSON

Exit codes:
    0 - Success, or usage shown
    1 - Lookup, clipboard or configuration failure
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from touch_dictionary.container import create_container
from touch_dictionary.infrastructure.clipboard import get_selected_text
from touch_dictionary.shared.diagnostics import APP_TAG
from touch_dictionary.shared.exceptions import ClipboardError, ConfigurationError, TouchDictionaryError
from touch_dictionary.shared.settings import load_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from touch_dictionary.application.lookup.service import LookupService
    from touch_dictionary.domain.entities.lookup import LookupResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="touchdictionary",
        description="TouchDictionary - Modern Dictionary Lookup",
    )
    parser.add_argument("words", nargs="*", help="Word or phrase to look up")
    parser.add_argument(
        "--selection",
        action="store_true",
        help="Look up the currently selected text (primary selection)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v: INFO, -vv: DEBUG)",
    )
    return parser


def configure_logging(verbosity: int, default_level: str = "WARNING") -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def format_result(result: LookupResult) -> str:
    """Render a LookupResult as the plain-text view."""
    lines = [
        "",
        "=== TouchDictionary Result ===",
        f"Query: {result.query}",
        f"Content Type: {result.content_type.value}",
        "",
    ]

    sections = result.sections
    for section in sections.definitions or ():
        lines.append(f"[DEFINITION] Source: {section.source}")
        for definition in section.definitions:
            if definition.part_of_speech:
                lines.append(f"  - ({definition.part_of_speech}): {definition.definition}")
            else:
                lines.append(f"  - {definition.definition}")
            if definition.example:
                lines.append(f"    Example: {definition.example}")
        lines.append("")

    if sections.wikipedia is not None:
        wiki = sections.wikipedia
        lines.append(f"[WIKIPEDIA] {wiki.title}")
        lines.append(wiki.summary)
        if wiki.url:
            lines.append(f"URL: {wiki.url}")
        lines.append("")

    if sections.thesaurus is not None:
        thesaurus = sections.thesaurus
        lines.append("[THESAURUS]")
        if thesaurus.synonyms:
            lines.append(f"  Synonyms: {', '.join(thesaurus.synonyms)}")
        if thesaurus.antonyms:
            lines.append(f"  Antonyms: {', '.join(thesaurus.antonyms)}")
        if thesaurus.related_terms:
            lines.append(f"  Related: {', '.join(thesaurus.related_terms)}")
        lines.append("")

    lines.append("========================")
    return "\n".join(lines)


def _report_error(component: str, message: str, stream: TextIO) -> None:
    print(f"[ERROR] [{APP_TAG}] [{component}] {message}", file=stream)


async def _run_lookup(query: str, settings: dict[str, Any], service: LookupService | None) -> LookupResult:
    if service is not None:
        return await service.lookup(query)

    container = create_container(settings)
    try:
        return await container.lookup_service().lookup(query)
    finally:
        await container.transport().aclose()


def main(
    argv: Sequence[str] | None = None,
    *,
    service: LookupService | None = None,
    selection_reader: Callable[[], str | None] = get_selected_text,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        _report_error("config", str(e), err)
        return 1

    configure_logging(args.verbose, settings["log_level"])

    if args.selection:
        query = selection_reader()
        if not query:
            _report_error("clipboard", str(ClipboardError()), err)
            return 1
        if not args.json:
            print(f"Looking up selected text: '{query}'", file=out)
    elif args.words:
        query = " ".join(args.words)
        if not args.json:
            print(f"Looking up: '{query}'", file=out)
    else:
        parser.print_help(file=out)
        return 0

    try:
        result = asyncio.run(_run_lookup(query, settings, service))
    except TouchDictionaryError as e:
        _report_error("lookup", f"Failed to lookup '{query}': {e}", err)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), file=out)
    else:
        print(format_result(result), file=out)
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


__all__ = ["build_parser", "format_result", "main", "run"]
