"""
Unified Exception Hierarchy for TouchDictionary.

Exception Hierarchy:
    TouchDictionaryError (base)
    ├── LookupValidationError
    │   └── EmptyQueryError
    ├── SourceError
    │   ├── SourceUnavailableError
    │   ├── SourceParseError
    │   ├── NotFoundError
    │   └── DisambiguationError
    ├── ClipboardError
    └── ConfigurationError

Only EmptyQueryError aborts a lookup. Every SourceError is absorbed by the
aggregator and surfaces as a missing section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    INFO = auto()  # Expected outcome, e.g. "no such entry"
    WARNING = auto()  # Recoverable absence
    ERROR = auto()  # Unexpected failure
    CRITICAL = auto()  # Cannot continue

    @property
    def log_level(self) -> int:
        """Matching ``logging`` level."""
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class ErrorCategory(Enum):
    """Categories for error classification."""

    VALIDATION = "validation"
    SOURCE = "source"
    COLLABORATOR = "collaborator"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Extra context attached to an error."""

    operation: str | None = None
    input_value: Any = None
    status_code: int | None = None
    suggestion: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class TouchDictionaryError(Exception):
    """
    Base exception for all TouchDictionary errors.

    Provides:
    - Structured error context
    - Severity classification
    - JSON-friendly formatting for the desktop bridge
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.SOURCE,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.status_code is not None:
            result["status_code"] = self.context.status_code
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        return result


# =============================================================================
# Validation Errors
# =============================================================================


class LookupValidationError(TouchDictionaryError):
    """Base class for invalid lookup input."""

    def __init__(self, message: str, *, context: ErrorContext | None = None) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class EmptyQueryError(LookupValidationError):
    """Raised when the normalized query is blank."""

    def __init__(self, raw_query: str | None = None) -> None:
        super().__init__(
            "Empty query",
            context=ErrorContext(
                operation="normalize",
                input_value=raw_query,
                suggestion="Provide a word or phrase to look up",
            ),
        )


# =============================================================================
# Source Errors
# =============================================================================


class SourceError(TouchDictionaryError):
    """Base class for failures of a single source client."""

    def __init__(
        self,
        source: str,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> None:
        super().__init__(message, context=context, severity=severity, category=ErrorCategory.SOURCE)
        self.source = source

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["source"] = self.source
        return result


class SourceUnavailableError(SourceError):
    """Raised when a source cannot be reached or answers with a failure status."""

    def __init__(
        self,
        source: str,
        message: str = "Source unavailable",
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(source, message, context=ErrorContext(status_code=status_code))


class SourceParseError(SourceError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(source, f"Failed to parse {source} response: {message}")


class NotFoundError(SourceError):
    """Raised when a source has no entry for the query."""

    def __init__(self, source: str, query: str) -> None:
        super().__init__(
            source,
            f"No entry found for '{query}'",
            context=ErrorContext(input_value=query, status_code=404),
            severity=ErrorSeverity.INFO,
        )


class DisambiguationError(SourceError):
    """Raised when an encyclopedia page is a disambiguation stub or empty."""

    def __init__(self, source: str, query: str) -> None:
        super().__init__(
            source,
            f"Disambiguation page or no content for '{query}'",
            context=ErrorContext(input_value=query),
            severity=ErrorSeverity.WARNING,
        )


# =============================================================================
# Collaborator / Configuration Errors
# =============================================================================


class ClipboardError(TouchDictionaryError):
    """Raised when no selected text can be read."""

    def __init__(self, message: str = "No text selected or could not access clipboard") -> None:
        super().__init__(message, category=ErrorCategory.COLLABORATOR)


class ConfigurationError(TouchDictionaryError):
    """Raised for configuration-related errors."""

    def __init__(self, message: str, *, context: ErrorContext | None = None) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


__all__ = [
    "ClipboardError",
    "ConfigurationError",
    "DisambiguationError",
    "EmptyQueryError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "LookupValidationError",
    "NotFoundError",
    "SourceError",
    "SourceParseError",
    "SourceUnavailableError",
    "TouchDictionaryError",
]
