"""
Presentation layer for Actor Search.

Turns pipeline outputs into view models (what a card or a detail panel
shows) and provides a console presenter. The pipelines never call into
this module; presenters subscribe to their outputs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .config import Config
from .exceptions import ActorSearchError
from .models import NotFound, PersonDetail, PersonSummary, ResultSet
from .utils import print_header, print_key_value, print_section

NO_RESULTS_MESSAGE = "No actors found. Please try a different search."
NO_FILMS_MESSAGE = "No films found for this actor."
DETAILS_NOT_FOUND_MESSAGE = "Actor details not found. Please try again."


def message_for(error: Optional[ActorSearchError]) -> Optional[str]:
    """User-facing message for an error, or None."""
    if error is None:
        return None
    return error.user_message


@dataclass(frozen=True)
class ResultCard:
    """One clickable search result."""

    id: int
    name: str
    image_url: str
    image_alt: str

    @classmethod
    def from_summary(cls, person: PersonSummary, config: Config) -> "ResultCard":
        return cls(
            id=person.id,
            name=person.name,
            image_url=config.image_url(person.profile_path),
            image_alt=person.name,
        )


@dataclass(frozen=True)
class ResultSetView:
    """Cards for a search, or the message to show instead."""

    query: str
    cards: List[ResultCard] = field(default_factory=list)
    message: Optional[str] = None

    @classmethod
    def build(cls, result_set: ResultSet, config: Config) -> "ResultSetView":
        if result_set.error is not None:
            return cls(query=result_set.query, message=message_for(result_set.error))
        if not result_set.people:
            return cls(query=result_set.query, message=NO_RESULTS_MESSAGE)
        return cls(
            query=result_set.query,
            cards=[ResultCard.from_summary(p, config) for p in result_set],
        )


def known_for_text(person: PersonSummary) -> str:
    """'Known for: A, B' line; N/A when TMDB sent no known_for list."""
    if person.known_for is None:
        return "Known for: N/A"
    return "Known for: " + ", ".join(item.title for item in person.known_for)


def popularity_text(person: PersonSummary) -> str:
    popularity = "N/A" if person.popularity is None else person.popularity
    return f"Popularity: {popularity}"


@dataclass(frozen=True)
class DetailView:
    """Everything the detail panel shows for one person."""

    found: bool
    name: str
    image_url: Optional[str] = None
    image_alt: Optional[str] = None
    known_for: Optional[str] = None
    popularity: Optional[str] = None
    filmography: List[str] = field(default_factory=list)
    filmography_message: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def build(cls, outcome: Union[PersonDetail, NotFound], config: Config) -> "DetailView":
        if isinstance(outcome, NotFound):
            return cls(found=False, name=outcome.name, message=DETAILS_NOT_FOUND_MESSAGE)

        # Entries without a title are shown blank rather than dropped
        titles = [entry.title for entry in outcome.filmography]
        return cls(
            found=True,
            name=outcome.name,
            image_url=config.image_url(outcome.profile_path),
            image_alt=outcome.name,
            known_for=known_for_text(outcome),
            popularity=popularity_text(outcome),
            filmography=titles,
            filmography_message=None if titles else NO_FILMS_MESSAGE,
        )


class Presenter(ABC):
    """Render sinks the pipelines' outputs are delivered to."""

    def __init__(self, config: Config):
        self.config = config

    @abstractmethod
    def render_result_set(self, result_set: ResultSet) -> ResultSetView:
        """Render search results (or the reason there are none)."""

    @abstractmethod
    def render_person_detail(self, outcome: Union[PersonDetail, NotFound]) -> DetailView:
        """Render a person's detail panel (or the not-found message)."""


class ConsolePresenter(Presenter):
    """Prints result cards and detail panels to stdout."""

    def render_result_set(self, result_set: ResultSet) -> ResultSetView:
        view = ResultSetView.build(result_set, self.config)
        print_header("Search Actors")

        if view.message:
            print(f"\n{view.message}")
            return view

        print(f"\nFound {len(view.cards)} people for '{view.query}':\n")
        for i, card in enumerate(view.cards, 1):
            print(f"  [{i}] {card.name} - ID: {card.id}")
            print(f"      {card.image_url}")
        return view

    def render_person_detail(self, outcome: Union[PersonDetail, NotFound]) -> DetailView:
        view = DetailView.build(outcome, self.config)

        if not view.found:
            print(f"\n{view.message}")
            return view

        print_section(view.name)
        print_key_value("Image", view.image_url)
        print(view.known_for)
        print(view.popularity)

        print_section("Filmography")
        if view.filmography_message:
            print(view.filmography_message)
        for title in view.filmography:
            print(f"  - {title}")
        return view
