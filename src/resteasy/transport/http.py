"""HTTP transport built on top of httpx."""

from __future__ import annotations

import httpx

from ..errors import TransportError
from ..logger import BoundLogger, create_logger
from .base import Request, TransportResponse


class HttpTransport:
    def __init__(
        self,
        *,
        request_timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(request_timeout))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    async def submit(self, request: Request) -> TransportResponse:
        request_headers = dict(request.headers)
        has_content_type = any(name.lower() == "content-type" for name in request_headers)
        if request.body is not None and not has_content_type:
            request_headers["Content-Type"] = "text/plain; charset=utf-8"

        try:
            self._logger.debug(
                "HTTP %s %s bytes=%d",
                request.method,
                request.url,
                len(request.body or ""),
            )
            response = await self._client.request(
                request.method,
                request.url,
                content=request.body,
                headers=request_headers,
            )
            body = response.text
            self._logger.debug(
                "HTTP <- %s status=%s bytes=%d",
                request.url,
                response.status_code,
                len(response.content),
            )
            return TransportResponse(
                status=response.status_code,
                body=body,
                headers={k.lower(): v for k, v in response.headers.items()},
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"{request.method} {request.url} timed out: {exc}", cause=exc) from exc
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}", cause=exc) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpTransport"]
