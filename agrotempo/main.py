"""FastAPI application entrypoint — lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agrotempo.catalog import get_species_catalog
from agrotempo.config import get_settings
from agrotempo.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from agrotempo.routes import phenology, reproduction, risk, species

logger = logging.getLogger("agrotempo")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Load and validate the species catalog (integrity faults abort startup)
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "agrotempo starting",
        extra={
            "log_level": settings.log_level,
            "forecast_window_periods": settings.forecast_window_periods,
        },
    )

    try:
        catalog = get_species_catalog()
    except Exception as exc:
        logger.exception("species catalog failed to load", extra={"error": str(exc)})
        raise
    app.state.species_count = len(catalog)

    yield

    logger.info("agrotempo shutting down")


app = FastAPI(
    title="agrotempo API",
    description=(
        "Temporal lifecycle & risk engine for farm records — crop phenology "
        "schedules, forecast risk verdicts, and livestock reproductive "
        "protocol date derivation."
    ),
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "agrotempo",
        "version": VERSION,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(species.router, prefix="/api/v1")
app.include_router(phenology.router, prefix="/api/v1")
app.include_router(risk.router, prefix="/api/v1")
app.include_router(reproduction.router, prefix="/api/v1")
