"""
Main Application - Main Layer

This module builds the FastAPI application: it loads settings, initializes
the container and includes the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from power_terminal import __version__
from power_terminal.main.config import AppSettings, get_settings
from power_terminal.main.container import init_container
from power_terminal.presentation.controllers import dashboard_router, system_router
from power_terminal.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the startup time and log the application lifecycle."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", version=__version__)
    yield
    logger.info("app.shutdown")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Preloaded settings, read from the environment when omitted

    Returns:
        FastAPI: The configured FastAPI application
    """
    # Logging must work while the settings themselves are being loaded
    configure_logging()
    settings = settings or get_settings()
    update_logging_from_settings(settings)

    container = init_container(settings)

    app = FastAPI(
        title="Power Terminal",
        description="Home energy dashboard for fixed-size displays",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.container = container

    app.include_router(dashboard_router)
    app.include_router(system_router)

    return app
