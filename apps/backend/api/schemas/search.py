"""
Search-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from api.schemas.person import ResultCard


class PeopleSearchResponse(BaseModel):
    """Response for people search endpoint."""

    query: str
    data: List[ResultCard]
    returned: int
    message: Optional[str] = None
