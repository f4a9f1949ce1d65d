"""Content API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Content and taxonomy routes mounted under settings.api_namespace
    - Global error handlers map every failure to the {code, message, data} envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - GET-only CORS: the API is read-only
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import content, health, taxonomies

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Content API started under {settings.api_namespace or '/'}")
    yield
    await close_db()
    logger.info("Content API shutting down")


app = FastAPI(
    title="Content API", version="1.4.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(content.router, prefix=settings.api_namespace)
app.include_router(taxonomies.router, prefix=settings.api_namespace)

register_error_handlers(app)
