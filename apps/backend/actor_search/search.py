"""
Search pipeline: free text in, ordered result cards out.
"""

import logging
from typing import Optional

from .client import TMDBClient
from .config import Config
from .exceptions import ActorSearchError, ValidationError
from .models import ResultSet
from .utils import setup_logger


class SearchPipeline:
    """
    Turns raw user input into a ResultSet.

    Never raises for expected failures: validation, transport, status and
    decode errors come back as an empty ResultSet with ``error`` set.

    Overlapping calls are not coordinated. A presenter that renders results
    as they arrive can show an older search after a newer one.
    """

    def __init__(
        self,
        client: TMDBClient,
        config: Config,
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.config = config
        self.logger = logger or setup_logger("search_pipeline", config.log_dir)

    @staticmethod
    def normalize_query(raw_input: Optional[str]) -> str:
        """Trim surrounding whitespace; None counts as empty."""
        return (raw_input or "").strip()

    def search(self, raw_input: Optional[str]) -> ResultSet:
        """
        Search people by name.

        Args:
            raw_input: Text as typed by the user

        Returns:
            ResultSet in upstream order; empty with ``error`` set on failure
        """
        query = self.normalize_query(raw_input)

        if not query:
            self.logger.info("Rejected empty search query")
            return ResultSet(query=query, error=ValidationError())

        try:
            people = self.client.search_people(query)
        except ActorSearchError as e:
            self.logger.warning(f"Search for '{query}' failed: {e}")
            return ResultSet(query=query, error=e)

        return ResultSet(people=people, query=query)
