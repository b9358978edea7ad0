"""HTTP transport utilities."""

from .transport import HttpTransport, HttpxTransport, TransportError, TransportResponse

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "TransportError",
    "TransportResponse",
]
