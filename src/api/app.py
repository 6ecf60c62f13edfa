"""FastAPI application factory and configuration.

This module provides the main FastAPI application with CORS configuration,
lifespan management, and route registration. The lifespan owns the single
``PortfolioSession``: it is mounted (carousel timer started) on startup and
unmounted (timer cancelled) on shutdown, including when startup of a later
step fails.

Example:
    from src.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn src.api.app:app --reload
"""

import asyncio
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.asyncio_scheduler import AsyncioScheduler
from src.api.dependencies import build_session
from src.api.routes import (
    carousel_router,
    health_router,
    page_router,
    theme_router,
    websocket_router,
)
from src.api.websocket import ConnectionManager, EventBridge
from src.core.config import PortfolioSettings
from src.core.health import HealthChecker, ServiceCheck, ServiceStatus
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession

logger = get_logger(__name__)

# Application version
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")


def _create_health_checker(session: PortfolioSession) -> HealthChecker:
    """Create a health checker reporting on the mounted session."""
    checker = HealthChecker(version=APP_VERSION)

    async def check_carousel() -> ServiceCheck:
        carousel = session.carousel
        if not carousel.is_running:
            return ServiceCheck(
                name="carousel",
                status=ServiceStatus.UNHEALTHY,
                message="Auto-advance timer not running",
            )
        return ServiceCheck(
            name="carousel",
            status=ServiceStatus.HEALTHY,
            message="Rotating",
            details={
                "active_index": carousel.active_index,
                "total": carousel.total_items,
                "interval_seconds": carousel.interval,
            },
        )

    async def check_content() -> ServiceCheck:
        content = session.content
        if not content.contacts:
            return ServiceCheck(
                name="content",
                status=ServiceStatus.DEGRADED,
                message="No contact links configured",
            )
        return ServiceCheck(
            name="content",
            status=ServiceStatus.HEALTHY,
            details={"projects": len(content.projects)},
        )

    checker.add_check("carousel", check_carousel)
    checker.add_check("content", check_content)

    return checker


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Mount the portfolio on startup and tear it down on shutdown."""
    logger.info("api_starting")

    settings = PortfolioSettings.from_env()
    session = build_session(settings, AsyncioScheduler())
    manager = ConnectionManager()
    bridge = EventBridge(manager, asyncio.get_running_loop())
    bridge.attach(session)

    app.state.session = session
    app.state.connection_manager = manager
    app.state.health_checker = _create_health_checker(session)

    with session:
        logger.info(
            "api_started",
            version=APP_VERSION,
            rotation_seconds=settings.rotation_seconds,
            direction_policy=settings.direction_policy,
        )
        try:
            yield
        finally:
            logger.info("api_shutting_down")
            bridge.detach()
            await bridge.drain()

    logger.info("api_shutdown_complete")


def create_app(
    title: str = "Portfolio API",
    description: str = "Interaction core for a single-page personal portfolio",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs.
        description: API description for OpenAPI docs.
        cors_origins: Allowed CORS origins. Defaults to the comma separated
            ``CORS_ORIGINS`` env var, or ["*"] when unset.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if cors_origins is None:
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        if cors_origins_env == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(page_router)
    app.include_router(theme_router)
    app.include_router(carousel_router)
    app.include_router(websocket_router)

    logger.info(
        "app_configured",
        title=title,
        cors_origins=cors_origins,
    )

    return app


# Default app instance for uvicorn
app = create_app()
