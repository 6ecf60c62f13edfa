"""HTTP API package for the portfolio page.

This module provides a FastAPI-based HTTP API that hosts one portfolio
session and exposes its state and interactions to a browser client.
"""

from src.api.app import create_app
from src.api.dependencies import get_connection_manager, get_session

__all__ = [
    "create_app",
    "get_connection_manager",
    "get_session",
]
