"""Transport implementations exposed to users."""

from .base import Method, Request, Transport, TransportResponse
from .http import HttpTransport

__all__ = [
    "HttpTransport",
    "Method",
    "Request",
    "Transport",
    "TransportResponse",
]
