"""Scheduler protocol for recurring timers.

The carousel's auto-advance tick is the only time-driven behavior in the
core. Instead of reaching for the event loop directly, the core asks a
``Scheduler`` for a repeating timer and keeps the returned ``TimerHandle``
so it can cancel it at teardown. The asyncio implementation lives in
``src.adapters``; tests use a manual-clock fake.
"""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """A running repeating timer.

    Cancelling is idempotent. Once ``cancel()`` returns, the callback will
    not be invoked again.
    """

    @property
    def cancelled(self) -> bool:
        """Whether ``cancel()`` has been called."""
        ...

    def cancel(self) -> None:
        """Stop the timer."""
        ...


class Scheduler(Protocol):
    """Factory for repeating timers."""

    def call_every(
        self, interval: float, callback: Callable[[], None]
    ) -> TimerHandle:
        """Invoke ``callback`` every ``interval`` seconds until cancelled.

        The first call happens one full interval after scheduling.

        Args:
            interval: Seconds between calls, must be positive.
            callback: Zero-argument callable run on the scheduler's thread.

        Returns:
            A handle that cancels the timer.
        """
        ...
