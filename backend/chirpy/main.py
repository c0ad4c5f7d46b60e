"""Chirpy API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {"error": ...} envelope
    - The HitCounter belongs to the app instance: created here, handed to the
      static-file middleware and exposed to handlers through app.state
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from chirpy.api.error_handlers import register_error_handlers
from chirpy.api.middleware import HitCountingMiddleware
from chirpy.api.routes import admin, chirps, users
from chirpy.config import Settings, get_settings
from chirpy.core.hit_counter import HitCounter
from chirpy.infrastructure.database import close_db, init_db
from chirpy.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Chirpy API started (platform={settings.platform})")
    yield
    await close_db()
    logger.info("Chirpy API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a Chirpy application with its own hit counter."""
    settings = settings or get_settings()
    hit_counter = HitCounter()

    app = FastAPI(title="Chirpy API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.hit_counter = hit_counter

    register_error_handlers(app)

    app.include_router(admin.router)
    app.include_router(users.router)
    app.include_router(chirps.router)

    # html=True serves index.html for /app/
    app.mount(
        "/app",
        HitCountingMiddleware(
            StaticFiles(directory=settings.filepath_root, html=True),
            hit_counter,
        ),
        name="app",
    )
    return app


app = create_app()
