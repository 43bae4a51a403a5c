"""Hall of Fame Service - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .database import Database
from .exceptions import register_exception_handlers
from .logging_config import setup_logging
from .routers import persons_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    logger: logging.Logger = app.state.logger
    database: Database = app.state.database

    logger.info("Starting %s v%s", settings.service_name, settings.service_version)
    try:
        await database.create_schema()
        logger.info("Database schema is up to date")
    except Exception as exc:
        logger.error("Failed to create database schema: %s", exc)

    yield

    await database.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured application.

    Tests pass their own ``settings`` to point at a throwaway database.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Hall of Fame Service",
        description="Persons and their skills",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings
    app.state.logger = logging.getLogger(settings.service_name)
    app.state.database = Database(settings)

    register_exception_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(persons_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "docs": "/docs" if settings.docs_enabled else None,
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hall_of_fame.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
