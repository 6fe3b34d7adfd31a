"""BFHL API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to an Envelope
    - Logging configured once on startup via lifespan context manager
    - run() serves on settings.port (3000 unless PORT is set)
    - Integer <-> string conversion has no digit limit: big Fibonacci terms and
      large integer inputs must round-trip through JSON (bodies are capped at
      max_body_bytes, which bounds the parsing cost)
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from bfhl.api.error_handlers import register_error_handlers
from bfhl.api.routes import bfhl, health
from bfhl.config import get_settings
from bfhl.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def allow_unbounded_int_strings() -> None:
    """Lift the int/str digit limit (Python 3.11+, some 3.10 patch releases)."""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.official_email:
        logger.warning("OFFICIAL_EMAIL is not set; envelopes will carry an empty email")
    logger.info(f"BFHL API started on port {settings.port}")
    yield
    logger.info("BFHL API shutting down")


allow_unbounded_int_strings()

app = FastAPI(title="BFHL API", version="1.0.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(bfhl.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "bfhl.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
