"""A private asyncio event loop running on a background thread."""

from __future__ import annotations

import asyncio
import itertools
import threading
from concurrent.futures import Future
from typing import Any, Coroutine, TypeVar

from .logger import BoundLogger, create_logger

T = TypeVar("T")

THREAD_NAME_PREFIX = "resteasy-loop"

_thread_ids = itertools.count(1)


class EventLoopThread:
    """Owns one event loop and the daemon thread that runs it.

    Coroutines may be submitted from any thread. ``stop()`` cancels whatever is
    still pending on the loop, closes it and joins the thread.
    """

    def __init__(self, *, logger: BoundLogger | None = None) -> None:
        self._logger = (logger or create_logger()).child("loop")
        self._loop = asyncio.new_event_loop()
        self._started = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            name=f"{THREAD_NAME_PREFIX}-{next(_thread_ids)}",
            daemon=True,
        )
        self._thread.start()
        self._started.wait()
        self._logger.debug("Started %s", self._thread.name)

    @property
    def name(self) -> str:
        return self._thread.name

    def is_running(self) -> bool:
        return self._thread.is_alive()

    def submit(self, coro: Coroutine[Any, Any, T]) -> Future[T]:
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def stop(self, timeout: float | None = None) -> None:
        if not self._thread.is_alive():
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        if self._thread.is_alive():
            self._logger.warn("%s did not stop within %ss", self._thread.name, timeout)
        else:
            self._logger.debug("Stopped %s", self._thread.name)

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.call_soon(self._started.set)
        try:
            self._loop.run_forever()
        finally:
            try:
                self._loop.run_until_complete(self._cancel_pending())
                self._loop.run_until_complete(self._loop.shutdown_asyncgens())
            finally:
                self._loop.close()

    async def _cancel_pending(self) -> None:
        current = asyncio.current_task()
        pending = [task for task in asyncio.all_tasks() if task is not current]
        if not pending:
            return
        self._logger.debug("Cancelling %d pending task(s)", len(pending))
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)


__all__ = ["EventLoopThread", "THREAD_NAME_PREFIX"]
