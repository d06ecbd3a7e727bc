"""StatusLab API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map StatusLabError → structured JSON responses
    - Any unhandled exception becomes a generic 500 at the catch-all boundary
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (ADR: ExMA import fan-out < 10)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from statuslab.infrastructure.observability import setup_logging
from statuslab.config import get_settings
from statuslab.api.error_handlers import register_error_handlers
from statuslab.api.routes import health, redirect_test, status_codes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(status_codes.router)
app.include_router(redirect_test.router)

register_error_handlers(app)
