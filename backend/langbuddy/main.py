"""Language Buddy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the 200 {"success": false} envelope
    - CORS: any origin by default, methods GET/POST/PUT/PATCH/DELETE, header Content-Type
    - Store connection opened on startup; a failure is logged and the API still starts
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from langbuddy.api.error_handlers import register_error_handlers
from langbuddy.api.routes import auth, health, mistakes, notebook, progress
from langbuddy.config import get_settings
from langbuddy.infrastructure.database import init_db
from langbuddy.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "DELETE", "PUT", "PATCH"]
CORS_HEADERS = ["Content-Type"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.store_url)
    await manager.connect()
    logger.info(f"Language Buddy API running on port {settings.port}")
    yield
    logger.info("Language Buddy API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Language Buddy API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(progress.router)
app.include_router(notebook.router)
app.include_router(mistakes.router)

register_error_handlers(app)
