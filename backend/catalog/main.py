"""Catalog Workspace API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Workspace initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
    - Initial state comes from an optional JSON snapshot (settings.initial_snapshot_path)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import catalog_entries, health, recycle_bin, workspace
from catalog.config import get_settings
from catalog.infrastructure.observability import setup_logging
from catalog.infrastructure.short_id import generate_short_id
from catalog.infrastructure.snapshot_loader import load_initial_state
from catalog.services.catalog_workspace import init_workspace

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_workspace(
        load_initial_state(settings.initial_snapshot_path),
        creator=settings.creator,
        expiry_label=settings.expiry_label,
        id_factory=lambda: generate_short_id(settings.record_id_length),
    )
    logger.info("Catalog workspace API started")
    yield
    logger.info("Catalog workspace API shutting down")


app = FastAPI(
    title="Catalog Workspace API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(workspace.router)
app.include_router(catalog_entries.router)
app.include_router(recycle_bin.router)

register_error_handlers(app)
