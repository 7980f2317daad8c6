"""Blocking HTTP client that waits on an asynchronous transport.

Usage::

    client = default_client()
    client.get(...)
    client.end()

    # or
    with_default_client(lambda client: client.get(...))

    # or
    resteasy.get(...)
"""

from __future__ import annotations

import threading
from concurrent.futures import CancelledError, Future, wait
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

from .errors import ClientClosedError, RestEasyError, TimeoutExceeded, TransportError
from .logger import LogLevel, create_logger
from .loop import EventLoopThread
from .transport import HttpTransport, Method, Request, Transport, TransportResponse
from .types import Failure, Result, Success

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 30


@dataclass
class ClientOptions:
    transport: Transport | None = None
    default_headers: Mapping[str, str] | None = None
    request_timeout: float | None = None
    shutdown_timeout: float = 5.0
    logger: object | None = None
    log_level: LogLevel = "info"


class RestClient:
    """Issues HTTP requests and blocks until each one finishes or times out.

    Each client owns its transport and a private event loop thread. Call
    ``end()`` exactly once when done, or use the client as a context manager.
    """

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        default_headers: Mapping[str, str] | None = None,
        request_timeout: float | None = None,
        shutdown_timeout: float = 5.0,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            transport=transport,
            default_headers=default_headers,
            request_timeout=request_timeout,
            shutdown_timeout=shutdown_timeout,
            logger=logger,
            log_level=log_level,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpTransport(
            request_timeout=options.request_timeout, logger=self._logger
        )
        self._default_headers = dict(options.default_headers or {})
        self._shutdown_timeout = options.shutdown_timeout
        self._loop = EventLoopThread(logger=self._logger)
        self._lock = threading.Lock()
        self._closed = False
        self._logger.info(
            "Initializing RestClient transport=%s loop=%s",
            type(self._transport).__name__,
            self._loop.name,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> Result[str]:
        return self._execute("GET", url, None, headers, timeout_seconds)

    def post(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> Result[str]:
        return self._execute("POST", url, body, headers, timeout_seconds)

    def put(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> Result[str]:
        return self._execute("PUT", url, body, headers, timeout_seconds)

    def delete(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> Result[str]:
        return self._execute("DELETE", url, None, headers, timeout_seconds)

    def end(self) -> None:
        """Close the transport and stop the event loop thread.

        Failures while closing are logged, not raised.
        """
        with self._lock:
            if self._closed:
                self._logger.debug("end() called on a client that already ended")
                return
            self._closed = True

        try:
            self._loop.submit(self._transport.aclose()).result(timeout=self._shutdown_timeout)
        except Exception as exc:
            self._logger.warn("Transport close failed: %r", exc)
        finally:
            self._loop.stop(timeout=self._shutdown_timeout)
        self._logger.debug("RestClient ended")

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.end()

    def _execute(
        self,
        method: Method,
        url: str,
        body: str | None,
        headers: Mapping[str, str] | None,
        timeout_seconds: float,
    ) -> Result[str]:
        if not url:
            raise ValueError("url must be a non-empty string")
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds!r}")

        request = Request(
            method=method,
            url=url,
            headers=self._merge_headers(headers),
            body=body,
            timeout=float(timeout_seconds),
        )
        self._logger.debug("%s %s timeout=%ss", method, url, request.timeout)
        # end() flips _closed under the same lock, so the loop is still open here
        with self._lock:
            if self._closed:
                raise ClientClosedError(f"Cannot {method} {url}: client has ended")
            future = self._loop.submit(self._transport.submit(request))
        return self._await(future, request)

    def _merge_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        """Per-call headers replace defaults with the same name, compared case-insensitively."""
        if not headers:
            return dict(self._default_headers)
        overridden = {name.lower() for name in headers}
        merged = {
            name: value
            for name, value in self._default_headers.items()
            if name.lower() not in overridden
        }
        merged.update(headers)
        return merged

    def _await(self, future: Future[TransportResponse], request: Request) -> Result[str]:
        done, _ = wait([future], timeout=request.timeout)
        if not done:
            # The request keeps running on the loop until end() discards it
            self._logger.warn("%s %s timed out after %ss", request.method, request.url, request.timeout)
            return Failure(
                TimeoutExceeded(
                    f"{request.method} {request.url} did not complete within {request.timeout}s",
                    timeout=request.timeout,
                )
            )

        try:
            response = future.result()
        except CancelledError as exc:
            return Failure(TransportError(f"{request.method} {request.url} was cancelled", cause=exc))
        except RestEasyError as exc:
            self._logger.warn("%s %s failed: %s", request.method, request.url, exc)
            return Failure(exc)
        except Exception as exc:
            self._logger.warn("%s %s failed: %r", request.method, request.url, exc)
            return Failure(TransportError(f"{request.method} {request.url} failed: {exc}", cause=exc))

        self._logger.debug(
            "%s %s <- status=%s chars=%d",
            request.method,
            request.url,
            response.status,
            len(response.body),
        )
        return Success(response.body)


def default_client(**options: Any) -> RestClient:
    """Create a client the caller owns; the caller must call ``end()``."""
    return RestClient(**options)


def with_default_client(fn: Callable[[RestClient], T], **options: Any) -> T:
    """Run ``fn`` with a fresh client and end the client on every exit path."""
    client = default_client(**options)
    try:
        return fn(client)
    finally:
        client.end()


def get(
    url: str,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    **options: Any,
) -> Result[str]:
    return with_default_client(lambda client: client.get(url, headers, timeout_seconds), **options)


def post(
    url: str,
    body: str,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    **options: Any,
) -> Result[str]:
    return with_default_client(lambda client: client.post(url, body, headers, timeout_seconds), **options)


def put(
    url: str,
    body: str,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    **options: Any,
) -> Result[str]:
    return with_default_client(lambda client: client.put(url, body, headers, timeout_seconds), **options)


def delete(
    url: str,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    **options: Any,
) -> Result[str]:
    return with_default_client(lambda client: client.delete(url, headers, timeout_seconds), **options)


__all__ = [
    "ClientOptions",
    "DEFAULT_TIMEOUT_SECONDS",
    "RestClient",
    "default_client",
    "delete",
    "get",
    "post",
    "put",
    "with_default_client",
]
