"""
FastAPI application for Actor Search.

Read-only API a browser page calls to search people on TMDB and
open a person's profile and filmography.
"""

import time
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_config
from api.exceptions import APIError, api_error_handler, generic_exception_handler
from api.logging_config import logger, generate_request_id, set_request_id
from api.routers import people, search

app = FastAPI(
    title="Actor Search API",
    description="Search actors on TMDB and browse their filmography",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_exception_handler(APIError, api_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)


def cors_origins() -> List[str]:
    """
    Allowed CORS origins; any origin unless ALLOWED_ORIGINS narrows it.

    Configuration is read when the app is built, so a bad value stops
    startup here with the offending setting named.
    """
    try:
        config = get_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise RuntimeError(f"Invalid Actor Search API configuration: {e}") from e
    return config.allowed_origins or ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    request_id = generate_request_id()
    set_request_id(request_id)

    # Skip logging for health checks and docs
    skip_paths = {"/health", "/", "/api/docs", "/api/redoc", "/api/openapi.json"}
    if request.url.path in skip_paths:
        return await call_next(request)

    start_time = time.time()
    client_ip = request.client.host if request.client else "unknown"

    logger.info(
        f"Request started: {request.method} {request.url.path} "
        f"from {client_ip}"
    )

    try:
        response = await call_next(request)
    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.2f}ms error={str(e)}"
        )
        raise

    duration_ms = (time.time() - start_time) * 1000
    log_msg = (
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration_ms:.2f}ms"
    )

    if response.status_code >= 500:
        logger.error(log_msg)
    elif response.status_code >= 400:
        logger.warning(log_msg)
    else:
        logger.info(log_msg)

    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(search.router, prefix="/api/v1", tags=["Search"])
app.include_router(people.router, prefix="/api/v1", tags=["People"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint points to docs."""
    return {
        "message": "Actor Search API",
        "docs": "/api/docs",
        "redoc": "/api/redoc",
    }


@app.get("/health", include_in_schema=False)
async def health():
    """Simple health check endpoint."""
    return {"status": "ok"}
