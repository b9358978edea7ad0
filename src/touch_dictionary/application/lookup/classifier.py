"""
ContentClassifier - decides whether a query is a Word or an Entity.

Architecture Decision:
    Stateless heuristics, no external calls. Classification runs on the
    *raw* query because normalization lowercases it and would hide the
    capitalization signal.

Example:
    >>> classifier = ContentClassifier()
    >>> classifier.classify("Paris")
    <ContentType.ENTITY: 'Entity'>
    >>> classifier.classify("hello")
    <ContentType.WORD: 'Word'>
"""

from __future__ import annotations

from touch_dictionary.domain.entities.lookup import ContentType

# Queries with more tokens than this are treated as named entities / phrases
MAX_WORD_TOKENS = 2


class ContentClassifier:
    """
    Rules, in order:
    1. First non-whitespace character is uppercase → ENTITY (proper noun)
    2. More than MAX_WORD_TOKENS tokens → ENTITY (multi-word phrase)
    3. Otherwise → WORD

    ``ContentType.MIXED`` is never emitted here.
    """

    def __init__(self, max_word_tokens: int = MAX_WORD_TOKENS) -> None:
        self._max_word_tokens = max_word_tokens

    def classify(self, raw_query: str) -> ContentType:
        stripped = raw_query.strip()
        if stripped[:1].isupper():
            return ContentType.ENTITY
        if len(stripped.split()) > self._max_word_tokens:
            return ContentType.ENTITY
        return ContentType.WORD


__all__ = ["MAX_WORD_TOKENS", "ContentClassifier"]
