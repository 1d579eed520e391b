"""
Detail pipeline: a selected person's name in, profile and filmography out.
"""

import logging
from typing import List, Optional, Union

from .client import TMDBClient
from .config import Config
from .exceptions import ActorSearchError, NotFoundError
from .models import FilmographyEntry, NotFound, PersonDetail, PersonSummary
from .utils import setup_logger


class DetailPipeline:
    """
    Resolves a display name back to a person and loads their credits.

    Only the name survives from a result card, so the person is looked up
    again by name and the first match is taken as canonical. The credits
    request depends on the resolved id and is issued afterwards.
    """

    def __init__(
        self,
        client: TMDBClient,
        config: Config,
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.config = config
        self.logger = logger or setup_logger("detail_pipeline", config.log_dir)

    def resolve(self, person_name: str) -> Union[PersonSummary, NotFound]:
        """
        Look a person up by exact name and return the first match.

        Args:
            person_name: Display name taken from a result card

        Returns:
            PersonSummary of the top match, or NotFound
        """
        try:
            matches = self.client.search_people(person_name)
        except ActorSearchError as e:
            self.logger.warning(f"Could not resolve '{person_name}': {e}")
            return NotFound(name=person_name, reason=e)

        if not matches:
            self.logger.info(f"No person matches '{person_name}'")
            return NotFound(name=person_name, reason=NotFoundError(person_name))

        return matches[0]

    def load_filmography(self, person_id: int) -> List[FilmographyEntry]:
        """Fetch a person's filmography; any failure yields an empty list."""
        try:
            return self.client.get_movie_credits(person_id)
        except ActorSearchError as e:
            self.logger.warning(f"Credits for person {person_id} unavailable: {e}")
            return []

    def load(self, person_name: str) -> Union[PersonDetail, NotFound]:
        """
        Load the detail view for a person.

        A failed credits request does not hide the identity fields; the
        detail comes back with an empty filmography instead.

        Args:
            person_name: Display name taken from a result card

        Returns:
            PersonDetail, or NotFound when the name resolves to nobody
        """
        resolved = self.resolve(person_name)
        if isinstance(resolved, NotFound):
            return resolved

        filmography = self.load_filmography(resolved.id)
        self.logger.info(
            f"Loaded details for '{resolved.name}' (ID: {resolved.id}), "
            f"{len(filmography)} credits"
        )
        return PersonDetail.from_summary(resolved, filmography)
