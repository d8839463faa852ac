"""
Main Application - Main Layer

Creates the FastAPI application, wires the container and mounts the
routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from appliance_identifier.main.config import get_settings
from appliance_identifier.main.container import app_lifespan, init_container
from appliance_identifier.presentation.controllers import (
    appliances_router,
    reference_router,
    system_router,
)
from appliance_identifier.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Bootstrap logging before settings are parsed
configure_logging()

update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and run the container lifecycle."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(appliances_router)
    app.include_router(reference_router)
    app.include_router(system_router)

    return app


app = create_app()
