import logging

import pytest

from resteasy import RestClient
from resteasy.logger import BoundLogger, create_logger

from .conftest import DummyTransport


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def debug(self, msg: str, *args) -> None:
        self.lines.append(("debug", msg % args))

    def info(self, msg: str, *args) -> None:
        self.lines.append(("info", msg % args))

    def warn(self, msg: str, *args) -> None:
        self.lines.append(("warn", msg % args))

    def error(self, msg: str, *args) -> None:
        self.lines.append(("error", msg % args))


def test_level_filters_lower_priority_messages() -> None:
    sink = RecordingLogger()
    logger = create_logger(logger=sink, level="warn")
    logger.info("hidden")
    logger.warn("shown %d", 1)
    assert sink.lines == [("warn", "shown 1")]


def test_create_logger_reuses_bound_logger() -> None:
    bound = BoundLogger(level="debug")
    assert create_logger(logger=bound) is bound


def test_child_uses_dotted_stdlib_name(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="resteasy")
    create_logger(level="debug").child("http").debug("hello")
    assert [(r.name, r.getMessage()) for r in caplog.records] == [("resteasy.http", "hello")]


def test_logging_failures_do_not_escape() -> None:
    class Broken:
        def info(self, msg: str, *args) -> None:
            raise RuntimeError("sink down")

    create_logger(logger=Broken()).info("ignored")


def test_client_logs_failures_as_warnings() -> None:
    sink = RecordingLogger()
    transport = DummyTransport(error=OSError("unreachable"))
    with RestClient(transport=transport, logger=sink, log_level="debug") as client:
        client.get("https://example.com/ok")
    levels = [level for level, _ in sink.lines]
    assert "info" in levels
    assert any(level == "warn" and "unreachable" in line for level, line in sink.lines)


def test_trace_goes_to_sink_trace_method() -> None:
    class TracingLogger(RecordingLogger):
        def trace(self, msg: str, *args) -> None:
            self.lines.append(("trace", msg % args))

    sink = TracingLogger()
    create_logger(logger=sink, level="trace").trace("frame %d", 7)
    assert sink.lines == [("trace", "frame 7")]
