"""API routes package.

This module contains all route handlers for the HTTP API.
"""

from src.api.routes.carousel import router as carousel_router
from src.api.routes.health import router as health_router
from src.api.routes.page import router as page_router
from src.api.routes.theme import router as theme_router
from src.api.routes.websocket import router as websocket_router

__all__ = [
    "carousel_router",
    "health_router",
    "page_router",
    "theme_router",
    "websocket_router",
]
