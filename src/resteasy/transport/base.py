"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Protocol, runtime_checkable

Method = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class Request:
    method: Method
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    timeout: float = 30.0


@dataclass
class TransportResponse:
    status: int
    body: str
    headers: Mapping[str, str]


@runtime_checkable
class Transport(Protocol):
    """Anything that can turn a Request into an eventual TransportResponse."""

    async def submit(self, request: Request) -> TransportResponse: ...

    async def aclose(self) -> None: ...


__all__ = ["Method", "Request", "Transport", "TransportResponse"]
