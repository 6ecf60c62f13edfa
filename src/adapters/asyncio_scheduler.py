"""asyncio implementation of the Scheduler port.

Ticks are anchored to the time the timer was created, so a slow callback
does not push later ticks back: tick ``n`` is due at ``start + n * interval``
on the loop's monotonic clock.
"""

import asyncio
import math
from collections.abc import Callable

from src.core.errors import InvalidArgumentError
from src.core.logging import get_logger

logger = get_logger(__name__)


class AsyncioRepeatingTimer:
    """A repeating timer driven by ``loop.call_at``.

    Only one ``asyncio.TimerHandle`` is outstanding at a time. The next tick
    is scheduled before the callback runs, so an exception raised by the
    callback reaches the loop's exception handler without stopping the timer.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._start = loop.time()
        self._ticks = 0
        self._cancelled = False
        self._handle: asyncio.TimerHandle | None = None
        self._schedule_next()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def ticks(self) -> int:
        """Number of times the callback has been invoked."""
        return self._ticks

    def _schedule_next(self) -> None:
        due = self._start + (self._ticks + 1) * self._interval
        self._handle = self._loop.call_at(due, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._ticks += 1
        self._schedule_next()
        self._callback()

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("timer_cancelled", interval=self._interval, ticks=self._ticks)


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    Example:
        scheduler = AsyncioScheduler()  # inside a running loop
        handle = scheduler.call_every(10.0, controller.advance)
        ...
        handle.cancel()
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Event loop to schedule on. Defaults to the running loop at
                the time ``call_every`` is first called.
        """
        self._loop = loop

    def call_every(
        self, interval: float, callback: Callable[[], None]
    ) -> AsyncioRepeatingTimer:
        if not math.isfinite(interval) or interval <= 0:
            raise InvalidArgumentError(
                f"Timer interval must be a positive finite number, got {interval}",
                argument="interval",
                value=interval,
            )
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        logger.debug("timer_scheduled", interval=interval)
        return AsyncioRepeatingTimer(self._loop, interval, callback)
