"""Repeating timers with explicit cancel handles."""

import logging
import threading
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class CancelHandle(Protocol):
    """Stops a scheduled repeating callback."""

    def cancel(self) -> None:
        ...


class Ticker(Protocol):
    """Schedules a callback to run every ``interval`` seconds until cancelled."""

    def schedule(self, interval: float, callback: Callable[[], None]) -> CancelHandle:
        ...


class _ThreadHandle:
    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self._interval = interval
        self._callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    @property
    def cancelled(self) -> bool:
        return self._stopped.is_set()

    def start(self) -> "_ThreadHandle":
        self._thread.start()
        return self

    def _run(self) -> None:
        # wait() returns True as soon as cancel() is called.
        while not self._stopped.wait(self._interval):
            try:
                self._callback()
            except Exception as e:
                logger.error(f"Tick callback failed: {e}")
                self._stopped.set()

    def cancel(self) -> None:
        self._stopped.set()


class ThreadTicker:
    """Runs each scheduled callback on its own daemon thread."""

    def schedule(self, interval: float, callback: Callable[[], None]) -> _ThreadHandle:
        return _ThreadHandle(interval, callback).start()
