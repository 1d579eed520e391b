"""Pydantic schemas for API request and response validation."""

from api.schemas.common import ErrorResponse
from api.schemas.person import PersonDetailResponse, ResultCard
from api.schemas.search import PeopleSearchResponse

__all__ = [
    # Common
    "ErrorResponse",
    # Person
    "PersonDetailResponse",
    "ResultCard",
    # Search
    "PeopleSearchResponse",
]
