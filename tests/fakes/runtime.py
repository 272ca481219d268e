"""
Deterministic stand-ins for time, tickers and the push executor.
"""
from concurrent.futures import Executor, Future
from typing import Callable, List


class FakeClock:
    """Callable clock returning a settable epoch time in seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualTicker:
    """Ticker that only fires when the test calls fire()."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def is_running(self) -> bool:
        return self.started and not self.cancelled

    def fire(self) -> None:
        if self.is_running:
            self.callback()


class ManualTickerFactory:
    """TickerFactory that records every ticker it creates."""

    def __init__(self):
        self.tickers: List[ManualTicker] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTicker:
        ticker = ManualTicker(interval, callback)
        self.tickers.append(ticker)
        return ticker

    def running(self) -> List[ManualTicker]:
        return [t for t in self.tickers if t.is_running]

    def fire_all(self) -> None:
        for ticker in self.running():
            ticker.fire()


class ImmediateExecutor(Executor):
    """Executor that runs each submitted call synchronously."""

    def __init__(self):
        self.submitted = 0

    def submit(self, fn, *args, **kwargs) -> Future:
        self.submitted += 1
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future
