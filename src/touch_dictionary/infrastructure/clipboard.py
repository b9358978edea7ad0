"""
Primary-selection reader for Linux desktops.

Tries Wayland first, then the X11 tools, and returns the first non-empty
trimmed selection.
"""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

SELECTION_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-paste", "--primary", "--no-newline"),
    ("xsel", "-o", "-p"),
    ("xclip", "-o", "-selection", "primary"),
)


def _read_command(command: tuple[str, ...], timeout: float) -> str | None:
    try:
        completed = subprocess.run(  # noqa: S603
            command,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError:
        logger.debug(f"{command[0]} not installed")
        return None
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"{command[0]} failed: {e}")
        return None

    if completed.returncode != 0:
        logger.debug(f"{command[0]} exited with {completed.returncode}")
        return None

    text = completed.stdout.decode("utf-8", errors="replace").strip()
    return text or None


def get_selected_text(
    commands: tuple[tuple[str, ...], ...] = SELECTION_COMMANDS,
    timeout: float = 2.0,
) -> str | None:
    """
    Read the primary selection.

    Returns:
        Trimmed selected text, or None when nothing is selected or no tool works
    """
    for command in commands:
        text = _read_command(command, timeout)
        if text:
            logger.debug(f"Selection read with {command[0]}")
            return text
    return None


__all__ = ["SELECTION_COMMANDS", "get_selected_text"]
