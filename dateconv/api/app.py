"""
FastAPI application factory for the date converter.

Creates and configures the FastAPI app from environment settings and
mounts the conversion routes.

Run with:
    uvicorn dateconv.api.app:app --reload
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dateconv.api.routes import configure_routes, router
from dateconv.core.layouts import Layout, input_layouts

# Load environment variables from .env
load_dotenv()


def _log_level(value: str | None) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Logging
logging.basicConfig(
    level=_log_level(os.getenv("LOG_LEVEL")),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _default_target_layout(value: str | None) -> Layout:
    """Read the default target layout, which must be parseable."""
    if value is None:
        return Layout.DD_MM_YYYY_DOT

    layout = Layout(value.strip())
    if layout not in input_layouts():
        raise ValueError(f"DEFAULT_TARGET_LAYOUT must be an input layout, got '{value}'")
    return layout


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    application = FastAPI(
        title="Date Convert",
        description="Convert date strings between numeric layouts",
        version="0.1.0",
    )

    # CORS — allow all origins in development
    allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    default_layout = _default_target_layout(os.getenv("DEFAULT_TARGET_LAYOUT"))

    # Configure routes with dependencies
    configure_routes(default_target_layout=default_layout)
    application.include_router(router, prefix="/api")

    logger.info("Date Convert backend ready (default target layout: %s)", default_layout.value)

    return application


# Create the app instance (used by uvicorn)
app = create_app()
