"""Main FastAPI application."""
import logging
import os
import sys
from contextlib import asynccontextmanager

import pydantic
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import ArgumentError

from tableorder.api import health, menu, orders, pages
from tableorder.api.auth import BasicAuthenticator
from tableorder.core.config import Settings, get_settings
from tableorder.core.errors import (
    FatalStartupError,
    TableOrderError,
    request_validation_error_handler,
    table_order_error_handler,
)
from tableorder.core.logging import setup_logging
from tableorder.db.database import Database
from tableorder.services.menu.seeding import seed_menu_if_empty

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    try:
        await database.connect()
    except Exception as e:
        logger.critical(f"[STARTUP] Database connection failed - {type(e).__name__}: {e}")
        raise FatalStartupError("initial database connection failed") from e
    logger.info("[STARTUP] Database connected")

    await seed_menu_if_empty(database.sessionmaker, settings.seed_file)
    yield

    # Shutdown
    await database.dispose()


def create_app(settings: Settings) -> FastAPI:
    """Build the application from explicit settings."""
    app = FastAPI(
        title="Table Order",
        description="Restaurant menu and table ordering backend",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.authenticator = BasicAuthenticator.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TableOrderError, table_order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(menu.router, tags=["menu"])
    app.include_router(orders.router, tags=["orders"])
    app.include_router(pages.router, tags=["pages"])

    # Mount static files (for frontend assets)
    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app


def run() -> None:
    """Console entry point: load settings and serve."""
    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        setup_logging()
        logger.critical(f"[STARTUP] Invalid configuration (is DATABASE_URL set?) - {e}")
        sys.exit(1)

    setup_logging(settings.log_level)
    try:
        app = create_app(settings)
    except ArgumentError as e:
        logger.critical(f"[STARTUP] Unusable DATABASE_URL - {e}")
        sys.exit(1)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
