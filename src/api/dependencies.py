"""FastAPI dependencies and session construction.

The app keeps exactly one ``PortfolioSession`` on ``app.state`` for its
lifespan. Route handlers receive it through ``get_session`` rather than a
module-level global, so tests can install their own session.

Example:
    from fastapi import Depends
    from src.api.dependencies import get_session

    @router.post("/theme/toggle")
    async def toggle(session: PortfolioSession = Depends(get_session)):
        return {"theme": session.toggle_theme().value}
"""

from pathlib import Path

from fastapi.requests import HTTPConnection
from pydantic import ValidationError

from src.api.schemas import ContentFile
from src.api.websocket import ConnectionManager
from src.core.config import PortfolioSettings
from src.core.content import DEFAULT_CONTENT, PortfolioContent, content_from_dict
from src.core.errors import ConfigurationError
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession
from src.ports.scheduler import Scheduler

logger = get_logger(__name__)


def load_content(path: Path | None) -> PortfolioContent:
    """Load portfolio content from a JSON file, or the built-in bundle.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation.
    """
    if path is None:
        return DEFAULT_CONTENT
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as ex:
        raise ConfigurationError(
            f"Cannot read content file {path}: {ex}", setting="PORTFOLIO_CONTENT_PATH"
        ) from ex
    try:
        parsed = ContentFile.model_validate_json(raw)
    except ValidationError as ex:
        raise ConfigurationError(
            f"Invalid content file {path}: {ex.error_count()} error(s)",
            setting="PORTFOLIO_CONTENT_PATH",
        ) from ex
    content = content_from_dict(parsed.model_dump())
    logger.info("content_loaded", path=str(path), projects=len(content.projects))
    return content


def build_session(
    settings: PortfolioSettings, scheduler: Scheduler
) -> PortfolioSession:
    """Create an unmounted session from settings."""
    return PortfolioSession(
        content=load_content(settings.content_path),
        scheduler=scheduler,
        rotation_seconds=settings.rotation_seconds,
        direction_policy=settings.direction_policy,
        start_dark=settings.start_dark,
    )


def get_session(connection: HTTPConnection) -> PortfolioSession:
    """FastAPI dependency for the mounted portfolio session."""
    session: PortfolioSession | None = getattr(connection.app.state, "session", None)
    if session is None:
        raise RuntimeError("Portfolio session not initialized")
    return session


def get_connection_manager(connection: HTTPConnection) -> ConnectionManager:
    """FastAPI dependency for the WebSocket connection manager."""
    manager: ConnectionManager | None = getattr(
        connection.app.state, "connection_manager", None
    )
    if manager is None:
        raise RuntimeError("Connection manager not initialized")
    return manager
