"""
FastAPI server — employee profile validation API.

Mounts the password and employee routers, CORS and request logging, and
translates uncaught failures into JSON error responses. Stateless: no
database, no per-request state survives the response.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from employee_validator import __version__
from employee_validator.api_server.employee import router as employee_router
from employee_validator.api_server.middleware import RequestLoggingMiddleware
from employee_validator.api_server.password import router as password_router
from employee_validator.config import get_settings
from employee_validator.validator_logging import get_logger

logger = get_logger(__name__)

ENDPOINTS = {
    "POST /check-password": "Check password strength",
    "POST /validate-name": "Validate full name",
    "POST /validate-email": "Validate email address",
    "POST /validate-phone": "Validate Cambodian phone number",
    "POST /validate-bio": "Validate short bio (basic)",
    "POST /validate-bio-ai": "Validate short bio with AI grammar check",
    "POST /validate-skills": "Validate skills",
    "POST /validate-all": "Validate all employee info at once",
    "GET /ai-status": "Get AI provider status",
}


# -----------------------------------------------------------------------------
# Lifespan: log effective configuration (keys are reported as present/absent only)
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "api_started",
        version=__version__,
        ai_provider=settings.ai_provider,
        openai_key_set=bool(settings.openai_api_key),
        gemini_key_set=bool(settings.gemini_api_key),
        ai_timeout_sec=settings.ai_timeout_sec,
    )
    yield
    logger.info("api_stopped")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Employee Info Validator API",
    description="Heuristic scoring for employee profile fields with optional AI bio checks.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(password_router)
app.include_router(employee_router)


@app.get("/api")
def api_info() -> dict[str, Any]:
    """Service banner and endpoint list."""
    return {
        "message": "Employee Info Validator API is running!",
        "endpoints": ENDPOINTS,
    }


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: any uncaught failure becomes a JSON 500 instead of a dropped connection."""
    logger.error("unhandled_exception", path=request.url.path, error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)},
    )
