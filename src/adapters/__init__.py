"""Adapters for external systems.

This module contains implementations of the port protocols on top of
concrete runtimes.
"""

from src.adapters.asyncio_scheduler import AsyncioRepeatingTimer, AsyncioScheduler

__all__ = [
    "AsyncioRepeatingTimer",
    "AsyncioScheduler",
]
