"""
Error taxonomy for the search and detail pipelines.

The client raises these; the pipelines catch them at their boundary
and turn them into empty results, so presenters only ever see values.
"""

from typing import Any, Dict, Optional


class ActorSearchError(Exception):
    """Base error with a user-facing message."""

    error = "actor_search_error"
    user_message = "Something went wrong. Please try again."

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.details == other.details
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ValidationError(ActorSearchError):
    """Empty query; rejected before any network call."""

    error = "validation_error"
    user_message = "Please enter an actor's name."

    def __init__(self, message: str = "Search query is empty"):
        super().__init__(message)


class NetworkError(ActorSearchError):
    """Transport-level failure (unreachable host, timeout, reset)."""

    error = "network_error"
    user_message = "Could not reach the movie database. Please try again."

    def __init__(self, endpoint: str, cause: Optional[BaseException] = None):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(
            f"Network error for {endpoint}: {cause}" if cause else f"Network error for {endpoint}",
            details={"endpoint": endpoint},
        )


class UpstreamError(ActorSearchError):
    """Non-success HTTP status from TMDB."""

    error = "upstream_error"
    user_message = "The movie database returned an error. Please try again."

    def __init__(self, endpoint: str, status_code: int):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(
            f"Upstream error ({status_code}) for {endpoint}",
            details={"endpoint": endpoint, "status_code": status_code},
        )


class DecodeError(ActorSearchError):
    """Response body does not have the expected shape."""

    error = "decode_error"
    user_message = UpstreamError.user_message

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(
            f"Unexpected response from {endpoint}: {reason}",
            details={"endpoint": endpoint, "reason": reason},
        )


class NotFoundError(ActorSearchError):
    """A name did not resolve to any person."""

    error = "not_found"
    user_message = "Actor details not found. Please try again."

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No person found for {name!r}", details={"name": name})
