"""
Session timers: the workout-elapsed tick and the rest countdown.

Time is read from an injectable clock so session logic is deterministic in
tests. Tickers fire a callback once per interval on a daemon thread and are
cancelled when the state that owns them is cleared.
"""

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

Clock = Callable[[], float]  # seconds since the epoch

DEFAULT_REST_SECONDS = 90
REST_CHOICES = (60, 90, 120, 180, 240, 300)
TICK_INTERVAL_SECONDS = 1.0


def system_clock() -> float:
    return time.time()


@dataclass
class RestTimer:
    """Rest countdown scoped to one exercise of the active workout."""
    exercise_id: str
    duration: int
    started_at: float

    def remaining(self, now: float) -> int:
        """Whole seconds left, rounded up, never negative."""
        left = self.duration - (now - self.started_at)
        return max(0, math.ceil(left))

    def is_finished(self, now: float) -> bool:
        return self.remaining(now) == 0


class Ticker(Protocol):
    """A cancellable periodic callback."""

    def start(self) -> None:
        ...

    def cancel(self) -> None:
        ...

    @property
    def is_running(self) -> bool:
        ...


TickerFactory = Callable[[float, Callable[[], None]], Ticker]


class ThreadTicker:
    """
    Calls ``callback`` every ``interval`` seconds until cancelled.

    Exceptions raised by the callback are logged and do not stop the ticker.
    """

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "ticker"):
        self._interval = interval
        self._callback = callback
        self._name = name
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        self._stopped.set()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            try:
                self._callback()
            except Exception as e:
                logger.exception(f"Ticker '{self._name}' callback failed: {e}")


def thread_ticker_factory(interval: float, callback: Callable[[], None]) -> Ticker:
    return ThreadTicker(interval, callback, name=getattr(callback, "__name__", "ticker"))
