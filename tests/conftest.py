import asyncio
import threading

import pytest

from resteasy.loop import THREAD_NAME_PREFIX
from resteasy.transport.base import Request, TransportResponse


class DummyTransport:
    def __init__(
        self,
        response: TransportResponse | None = None,
        *,
        error: Exception | None = None,
        delay: float = 0.0,
        close_error: Exception | None = None,
    ) -> None:
        self.response = response or TransportResponse(status=200, body="", headers={})
        self.error = error
        self.delay = delay
        self.close_error = close_error
        self.requests: list[Request] = []
        self.close_calls = 0

    async def submit(self, request: Request) -> TransportResponse:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


def loop_threads() -> set[str]:
    return {t.name for t in threading.enumerate() if t.name.startswith(THREAD_NAME_PREFIX)}


@pytest.fixture
def ok_transport() -> DummyTransport:
    return DummyTransport(TransportResponse(status=200, body="hello", headers={}))
