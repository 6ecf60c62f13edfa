"""Entry point for the HTTP API server.

Usage:
    # Development (with auto-reload):
    API_RELOAD=true python api_main.py

    # Or directly with uvicorn:
    uvicorn src.api.app:app --reload --host 0.0.0.0 --port 8000

The portfolio keeps its UI state in memory per process, so run a single
worker; every worker would otherwise rotate its own carousel.
"""

import os

import uvicorn

from src.core.logging import configure_logging

# Configure structured logging before importing app
configure_logging()

if __name__ == "__main__":
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    reload = os.getenv("API_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "src.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )
