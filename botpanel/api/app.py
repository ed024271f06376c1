"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from botpanel.api.routes import health, templates
from botpanel.config import VERSION, Config
from botpanel.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup
    setup_logging()
    logger.info(f"Starting Botpanel {VERSION}...")

    if Config.SUPABASE_URL and Config.SUPABASE_KEY:
        logger.info("Supabase configured, client will be created on first use")
    else:
        logger.warning("Supabase not configured - template preview unavailable")

    logger.info(f"User timezone: {Config.USER_TIMEZONE}")
    logger.info("Botpanel ready")

    yield

    # Shutdown
    logger.info("Botpanel stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Botpanel API",
        description="Chatbot dashboard backend - message template resolution",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(templates.router, prefix="/api/v1", tags=["Templates"])

    return app


app = create_app()
