"""Command-line surface."""

from .app import build_parser, format_result, main, run

__all__ = ["build_parser", "format_result", "main", "run"]
