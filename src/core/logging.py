"""Structured logging for the portfolio core and its HTTP surface.

Development runs get colored console output, production runs get one JSON
object per line. Enum members passed as event fields (``Direction``,
``Theme``, ``TransitionSource``) are rendered by value so both formats stay
readable.

Usage:
    from src.core.logging import configure_logging, get_logger

    configure_logging()  # once, at process start

    logger = get_logger(__name__)
    logger.info("carousel_advanced", active_index=1, direction=Direction.FORWARD)
"""

import logging
import sys
from enum import Enum
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def _render_enums(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace Enum field values with their plain values."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        development: Pretty console output when True, JSON when False.
            When None, ``ENVIRONMENT`` decides (anything but "production"
            counts as development).
        log_level: DEBUG, INFO, WARNING or ERROR. When None, ``LOG_LEVEL``
            decides, defaulting to INFO.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"

    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _render_enums,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    processors: list[Processor]
    if development:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by uvicorn or pytest
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)

    # The access log repeats what our route events already say
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually named after the calling module."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Attach fields to every subsequent log call in the current context.

    Example:
        bind_contextvars(client="ws-3")
        logger.info("project_selected", index=2)  # carries client="ws-3"
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Drop all bound context, typically when a WebSocket session ends."""
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    """Remove specific context variables."""
    structlog.contextvars.unbind_contextvars(*keys)
