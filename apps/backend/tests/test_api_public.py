"""
Public API user flow tests.

Tests mimic what the browser page would call.
"""

import logging
from dataclasses import replace
from unittest.mock import patch

import pytest

from actor_search.exceptions import DecodeError, NetworkError, UpstreamError
from actor_search.presentation import NO_FILMS_MESSAGE, NO_RESULTS_MESSAGE


class TestSearchFlow:
    """Flow 1: Search box - user types a name and presses search"""

    def test_search_returns_cards_in_order(self, api_client):
        response = api_client.get("/api/v1/search/people", params={"q": "Tom"})

        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "Tom"
        assert data["returned"] == 3
        assert [card["name"] for card in data["data"]] == ["Tom Hanks", "Tom Hardy", "Colin Hanks"]
        assert data["message"] is None

    def test_search_trims_query(self, api_client, mock_tmdb_client):
        response = api_client.get("/api/v1/search/people", params={"q": "  Tom Hanks  "})

        assert response.status_code == 200
        assert response.json()["query"] == "Tom Hanks"
        assert mock_tmdb_client.search_calls == ["Tom Hanks"]

    def test_cards_without_profile_use_default_image(self, api_client, config):
        response = api_client.get("/api/v1/search/people", params={"q": "Tom"})

        cards = response.json()["data"]
        assert cards[0]["image_url"].startswith(config.image_base_url)
        assert cards[1]["image_url"] == config.default_image
        assert cards[2]["image_url"] == config.default_image

    def test_blank_query_is_rejected_without_request(self, api_client, mock_tmdb_client):
        response = api_client.get("/api/v1/search/people", params={"q": "   "})

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["message"] == "Please enter an actor's name."
        assert mock_tmdb_client.request_count == 0

    def test_missing_query_is_rejected(self, api_client, mock_tmdb_client):
        response = api_client.get("/api/v1/search/people")

        assert response.status_code == 422
        assert mock_tmdb_client.request_count == 0

    def test_no_matches_returns_message(self, api_client):
        response = api_client.get("/api/v1/search/people", params={"q": "Zzyzx"})

        assert response.status_code == 200
        data = response.json()
        assert data["data"] == []
        assert data["message"] == NO_RESULTS_MESSAGE

    def test_upstream_failure_is_bad_gateway(self, api_client, mock_tmdb_client):
        mock_tmdb_client.search_error = UpstreamError("/search/person", 401)

        response = api_client.get("/api/v1/search/people", params={"q": "Tom"})

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "upstream_error"
        assert data["details"]["status_code"] == 401

    def test_decode_failure_is_bad_gateway(self, api_client, mock_tmdb_client):
        mock_tmdb_client.search_error = DecodeError("/search/person", "missing 'results' array")

        response = api_client.get("/api/v1/search/people", params={"q": "Tom"})

        assert response.status_code == 502
        assert response.json()["error"] == "decode_error"


class TestDetailFlow:
    """Flow 2: Detail panel - user clicks a result card"""

    def test_get_person_details(self, api_client):
        response = api_client.get("/api/v1/people/details", params={"name": "Tom Hanks"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Tom Hanks"
        assert data["known_for"] == "Known for: Forrest Gump, Toy Story, Band of Brothers"
        assert data["popularity"] == "Popularity: 48.3"
        assert data["filmography"] == ["Forrest Gump", "Toy Story", "Big"]
        assert data["filmography_message"] is None

    def test_unknown_person_is_not_found(self, api_client, mock_tmdb_client):
        response = api_client.get("/api/v1/people/details", params={"name": "Nobody"})

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "not_found"
        assert data["message"] == "Actor details not found. Please try again."
        assert mock_tmdb_client.credits_calls == []

    def test_identity_lookup_failure_is_bad_gateway(self, api_client, mock_tmdb_client):
        mock_tmdb_client.search_error = NetworkError("/search/person")

        response = api_client.get("/api/v1/people/details", params={"name": "Tom Hanks"})

        assert response.status_code == 502
        assert response.json()["error"] == "network_error"

    def test_credits_failure_still_shows_profile(self, api_client, mock_tmdb_client):
        mock_tmdb_client.credits_error = UpstreamError("/person/31/movie_credits", 500)

        response = api_client.get("/api/v1/people/details", params={"name": "Tom Hanks"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Tom Hanks"
        assert data["filmography"] == []
        assert data["filmography_message"] == NO_FILMS_MESSAGE

    def test_empty_name_is_rejected(self, api_client):
        response = api_client.get("/api/v1/people/details", params={"name": ""})

        assert response.status_code == 422


class TestServiceEndpoints:

    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_request_id_header(self, api_client):
        response = api_client.get("/api/v1/search/people", params={"q": "Tom"})

        assert len(response.headers["X-Request-ID"]) == 8

    def test_log_records_carry_request_id(self):
        from api.logging_config import RequestIdFilter, set_request_id

        set_request_id("abc12345")
        record = logging.LogRecord("actor_search_api", logging.INFO, __file__, 1, "hi", None, None)

        assert RequestIdFilter().filter(record)
        assert record.request_id == "abc12345"


class TestCorsOrigins:

    def test_any_origin_by_default(self, config):
        from api import main

        with patch.object(main, "get_config", return_value=config):
            assert main.cors_origins() == ["*"]

    def test_configured_origins(self, config):
        from api import main

        narrowed = replace(config, allowed_origins=["http://a.test"])
        with patch.object(main, "get_config", return_value=narrowed):
            assert main.cors_origins() == ["http://a.test"]

    def test_bad_configuration_names_the_setting(self):
        from api import main

        error = ValueError("REQUEST_TIMEOUT must be a number, got 'soon'")
        with patch.object(main, "get_config", side_effect=error):
            with pytest.raises(RuntimeError, match="REQUEST_TIMEOUT"):
                main.cors_origins()
