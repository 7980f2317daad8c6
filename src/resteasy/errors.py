"""Exceptions raised or returned by the resteasy client."""

from __future__ import annotations


class RestEasyError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class TransportError(RestEasyError):
    """Returned when the transport fails to produce a response."""


class TimeoutExceeded(RestEasyError):
    """Returned when no response arrives within the caller's timeout."""

    def __init__(self, message: str, *, timeout: float) -> None:
        super().__init__(message)
        self.timeout = timeout


class ClientClosedError(RestEasyError):
    """Raised when a request is made on a client that has already ended."""


__all__ = [
    "ClientClosedError",
    "RestEasyError",
    "TimeoutExceeded",
    "TransportError",
]
