"""Desktop-shell command bridge."""

from .commands import CommandError, DesktopBridge, get_initial_query, run_lookup_command

__all__ = ["CommandError", "DesktopBridge", "get_initial_query", "run_lookup_command"]
