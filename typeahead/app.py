"""
Main FastAPI application for Typeahead Service.

Wires together:
- Domain: Emoji entities and exceptions
- Search: Normalization, matching, triage, emoji ranking
- Routers: HTTP endpoints
"""

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .domain.exceptions import TypeaheadException
from .logging_config import configure_logging
from .metrics import metrics_endpoint, track_request_metrics
from .routers import health_router, typeahead_router

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="Typeahead Service",
    description="Ranking and matching engine for typeahead suggestion lists",
    version=settings.SERVICE_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID for distributed tracing."""
    request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


# Metrics middleware
@app.middleware("http")
async def track_metrics(request: Request, call_next):
    """Track Prometheus metrics."""
    start_time = time.time()
    response = await call_next(request)
    track_request_metrics(
        request.method, request.url.path, response.status_code, time.time() - start_time
    )
    return response


app.include_router(typeahead_router.router)
app.include_router(health_router.router)


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return metrics_endpoint()


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "status": "operational",
        "docs": "/api/docs",
        "health": "/api/v1/health",
    }


@app.exception_handler(TypeaheadException)
async def typeahead_exception_handler(request: Request, exc: TypeaheadException):
    """Map domain errors to 400 responses."""
    logger.warning(
        "Typeahead request rejected",
        path=request.url.path,
        error=exc.message,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": _error_code(exc),
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request.headers.get("X-Request-ID"),
        },
    )


def _error_code(exc: TypeaheadException) -> str:
    """InvalidCodeFormatException -> invalid_code_format."""
    name = type(exc).__name__.removesuffix("Exception")
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name).lstrip("_")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "typeahead.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
