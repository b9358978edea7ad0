"""
Shared kernel for TouchDictionary.

Provides:
- Unified exception hierarchy
- Injectable diagnostics
- Async utilities
- Environment settings
"""

from .async_utils import gather_with_errors
from .diagnostics import Diagnostics, LoggerDiagnostics
from .exceptions import (
    ClipboardError,
    ConfigurationError,
    DisambiguationError,
    EmptyQueryError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    LookupValidationError,
    NotFoundError,
    SourceError,
    SourceParseError,
    SourceUnavailableError,
    TouchDictionaryError,
)
from .settings import load_settings

__all__ = [
    # Exceptions
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
    # Diagnostics
    "Diagnostics",
    "LoggerDiagnostics",
    # Async
    "gather_with_errors",
    # Settings
    "load_settings",
]
