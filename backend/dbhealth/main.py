"""
FastAPI application entry point.
Assembles the app with routers, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from dbhealth.api.v1.endpoints import health
from dbhealth.api.v1.router import api_router
from dbhealth.core.config import settings
from dbhealth.core.exceptions import setup_exception_handlers
from dbhealth.core.logging import get_logger, setup_logging
from dbhealth.db.session import dispose_pool, warm_pool
from dbhealth.deps.di_container import Container

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Builds the connection pool on startup and disposes it on shutdown.
    """
    # Startup
    setup_logging()

    container: Container = app.state.container
    # Configuration errors raised here abort startup
    engine = container.engine()

    app_settings = container.settings()
    if app_settings.DB_POOL_PREWARM:
        await warm_pool(engine, container.pool_config().initial_size)

    logger.info("Application started")

    yield

    # Shutdown
    await dispose_pool(engine)
    container.reset_singletons()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Database liveness health check",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Store container in app state for access in routes
    app.state.container = container or Container()

    # Include API router
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    # Root-level health endpoint for probes
    app.include_router(health.router, include_in_schema=False)

    # Global exception handlers
    setup_exception_handlers(app)

    return app


app = create_app()


def run() -> None:
    """Run the application under uvicorn."""
    setup_logging()
    uvicorn.run(
        "dbhealth.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_config=None,
    )
