"""
People endpoints for the public API.
"""

from fastapi import APIRouter, Depends, Query

from actor_search.config import Config
from actor_search.detail import DetailPipeline
from actor_search.exceptions import NotFoundError as PersonNotFoundError
from actor_search.models import NotFound
from actor_search.presentation import DetailView
from api.dependencies import get_config, get_detail_pipeline
from api.exceptions import to_api_error
from api.schemas.common import ErrorResponse
from api.schemas.person import PersonDetailResponse

router = APIRouter()


@router.get(
    "/people/details",
    response_model=PersonDetailResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def get_person_details(
    name: str = Query(..., min_length=1, description="Name as shown on a result card"),
    pipeline: DetailPipeline = Depends(get_detail_pipeline),
    config: Config = Depends(get_config),
):
    """
    Get profile and filmography for a person selected from search results.

    A failed filmography lookup still returns the profile, with an empty
    filmography and its message set.
    """
    outcome = pipeline.load(name)
    if isinstance(outcome, NotFound):
        raise to_api_error(outcome.reason or PersonNotFoundError(name))

    view = DetailView.build(outcome, config)
    return PersonDetailResponse(
        name=view.name,
        image_url=view.image_url,
        image_alt=view.image_alt,
        known_for=view.known_for,
        popularity=view.popularity,
        filmography=view.filmography,
        filmography_message=view.filmography_message,
    )
