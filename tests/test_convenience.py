import pytest

import resteasy
from resteasy import Success, TransportResponse, default_client, with_default_client

from .conftest import DummyTransport, loop_threads


def test_default_client_is_caller_owned(ok_transport: DummyTransport) -> None:
    client = default_client(transport=ok_transport)
    try:
        assert client.get("https://example.com/ok") == Success("hello")
        assert ok_transport.close_calls == 0
    finally:
        client.end()
    assert ok_transport.close_calls == 1


def test_with_default_client_returns_function_result(ok_transport: DummyTransport) -> None:
    result = with_default_client(lambda c: c.get("https://example.com/ok"), transport=ok_transport)
    assert result == Success("hello")
    assert ok_transport.close_calls == 1


def test_with_default_client_ends_before_exception_propagates(ok_transport: DummyTransport) -> None:
    before = loop_threads()

    def work(client: resteasy.RestClient) -> None:
        client.get("https://example.com/ok")
        raise KeyError("unrelated")

    with pytest.raises(KeyError):
        with_default_client(work, transport=ok_transport)
    assert ok_transport.close_calls == 1
    assert loop_threads() <= before


@pytest.mark.parametrize(
    ("call", "method", "body"),
    [
        (lambda t: resteasy.get("https://example.com/a", transport=t), "GET", None),
        (lambda t: resteasy.post("https://example.com/a", "b", transport=t), "POST", "b"),
        (lambda t: resteasy.put("https://example.com/a", "b", transport=t), "PUT", "b"),
        (lambda t: resteasy.delete("https://example.com/a", transport=t), "DELETE", None),
    ],
)
def test_one_shot_calls_create_use_and_end_one_client(call, method: str, body: str | None) -> None:
    before = loop_threads()
    transport = DummyTransport(TransportResponse(status=204, body="done", headers={}))
    assert call(transport) == Success("done")
    assert [(r.method, r.body) for r in transport.requests] == [(method, body)]
    assert transport.requests[0].timeout == 30.0
    assert transport.close_calls == 1
    assert loop_threads() <= before
