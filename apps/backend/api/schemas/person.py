"""
Person-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ResultCard(BaseModel):
    """One clickable search result."""

    id: int
    name: str
    image_url: str = Field(..., description="Profile image, or the default image")
    image_alt: str


class PersonDetailResponse(BaseModel):
    """Profile panel for a selected person."""

    name: str
    image_url: str
    image_alt: str
    known_for: str = Field(..., description="'Known for: ...' line")
    popularity: str = Field(..., description="'Popularity: ...' line")
    filmography: List[str] = Field(default_factory=list, description="Titles, blank when unknown")
    filmography_message: Optional[str] = Field(None, description="Shown when filmography is empty")
