"""Ports (interfaces) for the application.

This module contains Protocol definitions for the services the portfolio
core depends on but does not implement itself. Today that is only the clock
behind the carousel's auto-advance timer.
"""

from src.ports.scheduler import Scheduler, TimerHandle

__all__ = [
    "Scheduler",
    "TimerHandle",
]
