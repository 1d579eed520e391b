"""
Actor Search - find people on TMDB and browse their filmography.

This package provides:
- A search pipeline turning free text into ordered result cards
- A detail pipeline resolving a name to a profile and filmography
- A shared TMDB request helper and the error taxonomy both pipelines use
- View models and a console presenter for rendering results
"""

from .config import Config
from .exceptions import (
    ActorSearchError,
    DecodeError,
    NetworkError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from .models import (
    FilmographyEntry,
    KnownForItem,
    NotFound,
    PersonDetail,
    PersonSummary,
    ResultSet,
)
from .client import TMDBClient
from .search import SearchPipeline
from .detail import DetailPipeline
from .presentation import ConsolePresenter, DetailView, Presenter, ResultCard, ResultSetView

__version__ = "1.0.0"
__all__ = [
    "Config",
    "ActorSearchError",
    "DecodeError",
    "NetworkError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
    "FilmographyEntry",
    "KnownForItem",
    "NotFound",
    "PersonDetail",
    "PersonSummary",
    "ResultSet",
    "TMDBClient",
    "SearchPipeline",
    "DetailPipeline",
    "ConsolePresenter",
    "DetailView",
    "Presenter",
    "ResultCard",
    "ResultSetView",
]
