"""Manual-clock implementation of the Scheduler protocol.

Time only moves when a test calls ``advance_time``. Timers fire in due
order, each tick at ``start + n * interval``, exactly like the asyncio
adapter.

Example:
    >>> scheduler = FakeScheduler()
    >>> calls = []
    >>> handle = scheduler.call_every(10.0, lambda: calls.append(scheduler.now))
    >>> scheduler.advance_time(25.0)
    >>> calls
    [10.0, 20.0]
"""

from collections.abc import Callable


class FakeTimer:
    """A repeating timer driven by FakeScheduler."""

    def __init__(
        self, start: float, interval: float, callback: Callable[[], None]
    ) -> None:
        self.start = start
        self.interval = interval
        self.callback = callback
        self.fired = 0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def next_due(self) -> float:
        return self.start + (self.fired + 1) * self.interval

    def cancel(self) -> None:
        self._cancelled = True


class FakeScheduler:
    """Scheduler whose clock is advanced explicitly by tests.

    Attributes:
        now: Current fake time in seconds.
        timers: Every timer ever created, cancelled or not.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    @property
    def active_timers(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def call_every(self, interval: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now, interval, callback)
        self.timers.append(timer)
        return timer

    def advance_time(self, seconds: float) -> None:
        """Move the clock forward, firing every tick that falls due."""
        deadline = self.now + seconds
        while True:
            due = [t for t in self.active_timers if t.next_due <= deadline]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_due)
            self.now = timer.next_due
            timer.fired += 1
            timer.callback()
        self.now = deadline
