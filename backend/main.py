"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="DreamShape API",
        description="Local-first workout tracker with optional Supabase sync",
        version="1.0.0",
        lifespan=_lifespan,
    )

    _configure_cors(app, settings)

    _include_routers(app)

    _log_remote_status(settings)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    _close_tracker()


def _close_tracker() -> None:
    """Stop timers and the push executor if the tracker was created."""
    from api.deps import get_tracker

    if get_tracker.cache_info().currsize:
        get_tracker().close()
        get_tracker.cache_clear()
        logger.info("Workout tracker closed")


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for dreamshape-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    extra_origins = settings.cors_allowed_origins.split(",")
    trusted_origins.extend([origin.strip() for origin in extra_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        templates_router,
        exercises_router,
        workout_router,
        history_router,
        stats_router,
        profile_router,
        auth_router,
        sync_router,
        exports_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(templates_router)
    app.include_router(exercises_router)
    app.include_router(workout_router)
    app.include_router(history_router)
    app.include_router(stats_router)
    app.include_router(profile_router)

    # Account and remote sync
    app.include_router(auth_router)
    app.include_router(sync_router)

    # Backup download (no prefix - /export at root)
    app.include_router(exports_router)


def _log_remote_status(settings: Settings) -> None:
    """Log whether remote sync is available at startup."""
    if settings.remote_enabled:
        logger.info("Supabase configured, remote sync available after sign-in")
    else:
        logger.info("Supabase not configured, running local-only")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
