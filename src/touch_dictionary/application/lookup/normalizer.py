"""Query normalization: trim, collapse whitespace, lowercase."""

from __future__ import annotations

from touch_dictionary.shared.exceptions import EmptyQueryError


def normalize_query(raw_query: str) -> str:
    """
    Normalize a raw query.

    Example:
        >>> normalize_query("  Hello   World  ")
        'hello world'
    """
    return " ".join(raw_query.split()).lower()


def require_query(raw_query: str) -> str:
    """
    Normalize a raw query, rejecting blank input.

    Raises:
        EmptyQueryError: When nothing is left after normalization
    """
    normalized = normalize_query(raw_query)
    if not normalized:
        raise EmptyQueryError(raw_query)
    return normalized


__all__ = ["normalize_query", "require_query"]
