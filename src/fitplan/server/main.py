"""
FitPlan FastAPI server main entrypoint.
Handles CORS, error handling, health checks and API routers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import psutil
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import SETTINGS
from ..errors import ConfigurationError
from ..logging_setup import setup_logging
from ..services import CoachService
from .routes.plan import router as r_plan


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(SETTINGS.LOG_LEVEL)
    logging.info(
        "FastAPI server startup completed (coach available: %s)", CoachService().is_available()
    )
    yield
    logging.info("FastAPI server shutdown completed")


app = FastAPI(
    title="FitPlan API",
    description="Weekly workout plans and daily nutrition targets",
    version=__import__("fitplan").__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_exc_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """
    Rule-table gaps are server faults, not user errors.
    """
    logging.exception("Plan configuration error in %s: %s", request.url, exc)
    return JSONResponse(
        {"success": False, "error": "configuration_error", "message": str(exc)},
        status_code=500,
    )


@app.exception_handler(Exception)
async def global_exc_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler: log and return a generic error response.
    """
    logging.exception("Unhandled error in %s: %s", request.url, exc)
    return JSONResponse(
        {"success": False, "error": "internal_error", "message": "Internal server error"},
        status_code=500,
    )


@app.get("/healthz")
async def healthz() -> dict:
    """
    Health check endpoint with system status.
    """
    try:
        memory = psutil.virtual_memory()
        cpu_percent = psutil.cpu_percent(interval=None)
        is_healthy = memory.percent < 90 and cpu_percent < 95

        return {
            "ok": is_healthy,
            "status": "healthy" if is_healthy else "degraded",
            "timestamp": datetime.now(UTC).isoformat(),
            "system": {
                "memory_percent": round(memory.percent, 1),
                "memory_available_mb": round(memory.available / 1024 / 1024, 1),
                "cpu_percent": round(cpu_percent, 1),
            },
            "coach": {"available": CoachService().is_available()},
        }

    except Exception as e:
        logging.exception("Health check failed: %s", e)
        return {
            "ok": False,
            "status": "error",
            "timestamp": datetime.now(UTC).isoformat(),
            "error": str(e),
        }


@app.get("/")
async def root() -> dict:
    """
    Root endpoint with API information.
    """
    return {
        "ok": True,
        "name": "FitPlan API",
        "version": app.version,
        "description": "Weekly workout plans and daily nutrition targets",
    }


app.include_router(r_plan, prefix="/api/v1", tags=["plan"])
