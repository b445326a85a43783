"""Artist Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {"error": message} responses
    - CORS allows any configured origin with GET/POST/PUT/DELETE/OPTIONS
    - Any OPTIONS request returns an empty 200 before route dispatch
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORSMiddleware decorates simple responses; api/cors.answer_preflight owns OPTIONS
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artist_catalog.api.cors import (
    CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, answer_preflight,
)
from artist_catalog.api.error_handlers import register_error_handlers
from artist_catalog.api.routes import artists, health
from artist_catalog.config import get_settings
from artist_catalog.infrastructure.database import close_db, init_db
from artist_catalog.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{settings.service_name} {settings.version} started")
    yield
    await close_db()
    logger.info(f"{settings.service_name} shutting down")


app = FastAPI(
    title=settings.service_name, version=settings.version, lifespan=lifespan,
)

app.middleware("http")(log_requests)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
)

# Added last so it wraps CORSMiddleware
app.middleware("http")(answer_preflight)

app.include_router(health.router)
app.include_router(artists.router)

register_error_handlers(app)
