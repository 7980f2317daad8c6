"""Public surface for the resteasy blocking HTTP client."""

from .client import (
    DEFAULT_TIMEOUT_SECONDS,
    ClientOptions,
    RestClient,
    default_client,
    delete,
    get,
    post,
    put,
    with_default_client,
)
from .errors import ClientClosedError, RestEasyError, TimeoutExceeded, TransportError
from .transport import HttpTransport, Request, Transport, TransportResponse
from .types import Failure, Result, Success
from .version import __version__

__all__ = [
    "__version__",
    "ClientClosedError",
    "ClientOptions",
    "DEFAULT_TIMEOUT_SECONDS",
    "Failure",
    "HttpTransport",
    "Request",
    "RestClient",
    "RestEasyError",
    "Result",
    "Success",
    "TimeoutExceeded",
    "Transport",
    "TransportError",
    "TransportResponse",
    "default_client",
    "delete",
    "get",
    "post",
    "put",
    "with_default_client",
]
