"""
Custom exceptions and error handlers for the API.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from actor_search.exceptions import (
    ActorSearchError,
    NotFoundError as PersonNotFoundError,
    ValidationError as EmptyQueryError,
)


class APIError(HTTPException):
    """Base API error with structured error response."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error = error
        self.message = message
        self.details = details
        super().__init__(status_code=status_code, detail=message)


class NotFoundError(APIError):
    """Person not found error."""

    def __init__(self, name: str, message: str):
        super().__init__(
            status_code=404,
            error="not_found",
            message=message,
            details={"resource": "Person", "name": name},
        )


class ValidationError(APIError):
    """Request validation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=422,
            error="validation_error",
            message=message,
            details=details,
        )


class UpstreamUnavailableError(APIError):
    """TMDB unreachable, failing, or returning an unexpected body."""

    def __init__(self, error: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=502,
            error=error,
            message=message,
            details=details,
        )


def to_api_error(exc: ActorSearchError) -> APIError:
    """Map a pipeline error onto the HTTP error it is reported as."""
    if isinstance(exc, EmptyQueryError):
        return ValidationError(exc.user_message)
    if isinstance(exc, PersonNotFoundError):
        return NotFoundError(exc.name, exc.user_message)
    return UpstreamUnavailableError(exc.error, exc.user_message, exc.details or None)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions and return structured JSON response."""
    content = {
        "error": exc.error,
        "message": exc.message,
    }
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )
