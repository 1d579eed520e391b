"""
Search endpoints for the public API.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from actor_search.config import Config
from actor_search.presentation import ResultSetView
from actor_search.search import SearchPipeline
from api.dependencies import get_config, get_search_pipeline
from api.exceptions import to_api_error
from api.schemas.common import ErrorResponse
from api.schemas.person import ResultCard
from api.schemas.search import PeopleSearchResponse

router = APIRouter()


@router.get(
    "/search/people",
    response_model=PeopleSearchResponse,
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def search_people(
    q: str = Query("", description="Actor or actress name"),
    pipeline: SearchPipeline = Depends(get_search_pipeline),
    config: Config = Depends(get_config),
):
    """
    Search TMDB people by name.

    Results keep TMDB's relevance order. An empty match list is not an
    error; the response carries the message to show instead of cards.
    """
    result_set = pipeline.search(q)
    if result_set.error is not None:
        raise to_api_error(result_set.error)

    view = ResultSetView.build(result_set, config)
    return PeopleSearchResponse(
        query=view.query,
        data=[ResultCard(**asdict(card)) for card in view.cards],
        returned=len(view.cards),
        message=view.message,
    )
