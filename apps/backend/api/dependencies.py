"""
Dependency injection for the API.

Provides configuration, the TMDB client and the two pipelines.
"""

from functools import lru_cache

from actor_search.client import TMDBClient
from actor_search.config import Config
from actor_search.detail import DetailPipeline
from actor_search.search import SearchPipeline


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()


@lru_cache()
def get_tmdb_client() -> TMDBClient:
    """Get cached TMDBClient instance."""
    return TMDBClient(get_config())


def get_search_pipeline() -> SearchPipeline:
    """Build a SearchPipeline over the shared client."""
    return SearchPipeline(get_tmdb_client(), get_config())


def get_detail_pipeline() -> DetailPipeline:
    """Build a DetailPipeline over the shared client."""
    return DetailPipeline(get_tmdb_client(), get_config())
