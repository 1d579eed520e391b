"""
TMDB API client for Actor Search.

Handles all TMDB API interactions including:
- Request construction (base URL + endpoint + percent-encoded query string)
- A single GET per call, no retries and no caching
- Mapping transport, status and shape failures onto the error taxonomy
- Response parsing into data models
"""

from typing import List, Optional
from urllib.parse import quote, urlencode

import requests

from .config import Config
from .exceptions import DecodeError, NetworkError, UpstreamError
from .models import FilmographyEntry, PersonSummary
from .utils import setup_logger


def encode_component(value, safe="", encoding=None, errors=None) -> str:
    """Percent-encode a query value the way a browser's encodeURIComponent does."""
    return quote(value, safe="!'()*", encoding=encoding, errors=errors)


class TMDBClient:
    """
    Handles all TMDB API interactions.

    Every public method issues exactly one GET request. Failures are raised
    as NetworkError, UpstreamError or DecodeError; callers decide how to
    degrade.
    """

    SEARCH_PERSON_ENDPOINT = "/search/person"
    MOVIE_CREDITS_ENDPOINT = "/person/{person_id}/movie_credits"

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or self._create_session()
        self.logger = setup_logger("tmdb_client", config.log_dir)
        if config.request_timeout is None:
            self.logger.info("No request timeout configured; a stalled upstream blocks the caller")

    def _create_session(self) -> requests.Session:
        """Create requests session with default headers."""
        session = requests.Session()
        session.headers.update(self.config.get_headers())
        return session

    def build_url(self, endpoint: str, params: Optional[dict] = None) -> str:
        """
        Build a request URL from the base URL, endpoint and query parameters.

        The API key is always sent first. Values are percent-encoded, so a
        space becomes %20 rather than '+', and !'()* stay literal.

        Args:
            endpoint: API endpoint (e.g., '/search/person')
            params: Query parameters other than the API key

        Returns:
            Absolute URL
        """
        query = {"api_key": self.config.api_key}
        query.update(params or {})
        return f"{self.config.base_url}{endpoint}?{urlencode(query, quote_via=encode_component)}"

    def get_json(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """
        Issue one GET request and decode the JSON body.

        Args:
            endpoint: API endpoint
            params: Query parameters other than the API key

        Returns:
            Decoded JSON object

        Raises:
            NetworkError: On transport failure
            UpstreamError: On a non-2xx status
            DecodeError: If the body is not a JSON object
        """
        url = self.build_url(endpoint, params)

        try:
            response = self.session.get(url, timeout=self.config.request_timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request error for {endpoint}: {e}")
            raise NetworkError(endpoint, e) from e

        if not 200 <= response.status_code < 300:
            self.logger.error(f"HTTP {response.status_code} for {endpoint}")
            raise UpstreamError(endpoint, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON from {endpoint}: {e}")
            raise DecodeError(endpoint, "body is not valid JSON") from e

        if not isinstance(data, dict):
            raise DecodeError(endpoint, "body is not a JSON object")

        return data

    def _get_array(self, endpoint: str, params: dict, key: str) -> List[dict]:
        """Fetch an endpoint and return the top-level array stored under key."""
        data = self.get_json(endpoint, params)
        items = data.get(key)
        if not isinstance(items, list):
            raise DecodeError(endpoint, f"missing '{key}' array")
        return items

    def search_people(self, query: str) -> List[PersonSummary]:
        """
        Search people by name.
        Uses: /search/person?api_key={key}&query={query}

        Args:
            query: Name to search for, sent as given (callers trim)

        Returns:
            PersonSummary list in upstream relevance order
        """
        endpoint = self.SEARCH_PERSON_ENDPOINT
        results = self._get_array(endpoint, {"query": query}, "results")

        try:
            people = [PersonSummary.from_tmdb(item) for item in results]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(endpoint, f"malformed person entry: {e}") from e

        self.logger.info(f"Search '{query}': {len(people)} people")
        return people

    def get_movie_credits(self, person_id: int) -> List[FilmographyEntry]:
        """
        Get the movies a person is credited in as cast.
        Uses: /person/{id}/movie_credits?api_key={key}&language={language}

        Args:
            person_id: TMDB person ID

        Returns:
            FilmographyEntry list in upstream order
        """
        endpoint = self.MOVIE_CREDITS_ENDPOINT.format(person_id=person_id)
        cast = self._get_array(endpoint, {"language": self.config.language}, "cast")

        try:
            return [FilmographyEntry.from_tmdb(item) for item in cast]
        except (TypeError, AttributeError) as e:
            raise DecodeError(endpoint, f"malformed credit entry: {e}") from e

    def test_connection(self) -> bool:
        """Test API connection with a known person search."""
        try:
            self.search_people("Tom Hanks")
            return True
        except (NetworkError, UpstreamError, DecodeError) as e:
            self.logger.error(f"API connection test failed: {e}")
            return False
