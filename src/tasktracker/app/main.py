"""Entry point for the task tracking FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db import Database
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    settings: Settings = application.state.settings
    database: Database = application.state.database
    if settings.db_create_all:
        logger.info("Creating database tables")
        await database.create_all()
    try:
        yield
    finally:
        await database.dispose()


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The database is built once here and shared by every request through
    ``app.state``; pass ``database`` to run the application against another
    engine.
    """

    settings = settings or get_settings()
    configure_logging(settings)

    router_prefix = settings.router_prefix
    openapi_url = f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Track tasks assigned to users, grouped by category and priority.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
        lifespan=_lifespan,
    )

    application.state.settings = settings
    application.state.database = database or Database.from_settings(settings)

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    application.include_router(api_router, prefix=router_prefix)
    application.include_router(health_router)

    register_exception_handlers(application)

    return application


app = create_app()


def run() -> None:
    """Convenience entry point for the ``tasktracker`` console script."""

    settings = get_settings()
    uvicorn.run(
        "tasktracker.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
