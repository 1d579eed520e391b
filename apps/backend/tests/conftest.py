"""
Shared fixtures for Actor Search tests.

Provides a mock TMDB client, a mocked HTTP session, and sample data.
"""

import pytest
from typing import Dict, List, Optional
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from actor_search.client import TMDBClient
from actor_search.config import Config
from actor_search.exceptions import ActorSearchError
from actor_search.models import FilmographyEntry, PersonSummary


# =============================================================================
# SAMPLE DATA
# =============================================================================

TOM_HANKS = {
    "id": 31,
    "name": "Tom Hanks",
    "profile_path": "/xndWFsBlClOJFRdhSt4NBwiPq2o.jpg",
    "popularity": 48.3,
    "known_for": [
        {"title": "Forrest Gump"},
        {"title": "Toy Story"},
        {"name": "Band of Brothers"},
    ],
}

TOM_HARDY = {
    "id": 2524,
    "name": "Tom Hardy",
    "profile_path": None,
    "popularity": 30.1,
    "known_for": [{"title": "Inception"}],
}

COLIN_HANKS = {
    "id": 3489,
    "name": "Colin Hanks",
    "popularity": 10.5,
}

SEARCH_RESULTS = [TOM_HANKS, TOM_HARDY, COLIN_HANKS]

TOM_HANKS_CREDITS = {
    "id": 31,
    "cast": [
        {"id": 13, "title": "Forrest Gump", "character": "Forrest Gump"},
        {"id": 862, "title": "Toy Story", "character": "Woody (voice)"},
        {"id": 2280, "name": "Big", "character": "Josh Baskin"},
    ],
}


def summary(data: dict) -> PersonSummary:
    """Build a PersonSummary from a sample payload."""
    return PersonSummary.from_tmdb(data)


def make_response(
    status_code: int = 200,
    payload: Optional[object] = None,
    json_error: bool = False,
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = payload
    return response


# =============================================================================
# MOCK TMDB CLIENT
# =============================================================================

class MockTMDBClient:
    """Mock TMDB client that answers from in-memory data and records calls."""

    def __init__(
        self,
        people: Optional[Dict[str, List[PersonSummary]]] = None,
        credits: Optional[Dict[int, List[FilmographyEntry]]] = None,
    ):
        self.people = people if people is not None else {}
        self.credits = credits if credits is not None else {}
        self.search_error: Optional[ActorSearchError] = None
        self.credits_error: Optional[ActorSearchError] = None
        self.connection_ok = True
        self.search_calls: List[str] = []
        self.credits_calls: List[int] = []

    @property
    def request_count(self) -> int:
        return len(self.search_calls) + len(self.credits_calls)

    def search_people(self, query: str) -> List[PersonSummary]:
        self.search_calls.append(query)
        if self.search_error:
            raise self.search_error
        return list(self.people.get(query, []))

    def get_movie_credits(self, person_id: int) -> List[FilmographyEntry]:
        self.credits_calls.append(person_id)
        if self.credits_error:
            raise self.credits_error
        return list(self.credits.get(person_id, []))

    def test_connection(self) -> bool:
        return self.connection_ok


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config(tmp_path):
    """Configuration pointing logs at a temp dir."""
    return Config(
        api_key="test-key",
        base_url="https://api.example.org/3",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def mock_session():
    """Mocked requests.Session; set .get.return_value or .get.side_effect."""
    session = MagicMock()
    session.get.return_value = make_response(200, {"results": []})
    return session


@pytest.fixture
def tmdb_client(config, mock_session):
    """Real TMDBClient over a mocked HTTP session."""
    return TMDBClient(config, session=mock_session)


@pytest.fixture
def mock_tmdb_client():
    """Mock TMDB client pre-loaded with the Tom Hanks sample data."""
    return MockTMDBClient(
        people={
            "Tom": [summary(p) for p in SEARCH_RESULTS],
            "Tom Hanks": [summary(TOM_HANKS)],
        },
        credits={
            31: [FilmographyEntry.from_tmdb(c) for c in TOM_HANKS_CREDITS["cast"]],
        },
    )


@pytest.fixture
def api_client(config, mock_tmdb_client):
    """Provide FastAPI test client with mocked dependencies."""
    from api.main import app
    from api import dependencies
    from actor_search.detail import DetailPipeline
    from actor_search.search import SearchPipeline

    # Clear any cached config/client from previous runs
    dependencies.get_config.cache_clear()
    dependencies.get_tmdb_client.cache_clear()

    app.dependency_overrides[dependencies.get_config] = lambda: config
    app.dependency_overrides[dependencies.get_search_pipeline] = (
        lambda: SearchPipeline(mock_tmdb_client, config)
    )
    app.dependency_overrides[dependencies.get_detail_pipeline] = (
        lambda: DetailPipeline(mock_tmdb_client, config)
    )

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
