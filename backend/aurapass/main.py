"""Aurapass API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AurapassError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized, tables ensured and bootstrap accounts seeded on startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static web client mounted last and only if present, so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import aurapass.models  # noqa: F401  (registers all tables on Base.metadata)
from aurapass.api.error_handlers import register_error_handlers
from aurapass.api.routes import (
    announcements, auth, events, health, profile, registrations, users,
)
from aurapass.config import get_settings
from aurapass.infrastructure.database import init_db
from aurapass.infrastructure.observability import setup_logging
from aurapass.services.bootstrap import seed_bootstrap_users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.auto_create_tables:
        await manager.create_all()
    async with manager.session() as db:
        await seed_bootstrap_users(db, settings)
    logger.info("Aurapass API started")
    yield
    logger.info("Aurapass API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Aurapass API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(events.router)
app.include_router(registrations.router)
app.include_router(announcements.router)
app.include_router(profile.router)

register_error_handlers(app)

# Static files — serves the web client build when deployed alongside the API
if os.path.isdir("public"):
    app.mount("/", StaticFiles(directory="public", html=True), name="static")
