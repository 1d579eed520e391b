"""
Data models for Actor Search.

Provides dataclasses for type-safe data handling throughout the pipelines.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .exceptions import ActorSearchError


def resolve_title(data: dict) -> str:
    """Display title of a credit: 'title', then 'name', then blank."""
    return data.get("title") or data.get("name") or ""


@dataclass(frozen=True)
class KnownForItem:
    """A work a person is known for, as listed in search results."""

    title: str

    @classmethod
    def from_tmdb(cls, data: dict) -> "KnownForItem":
        """Create from a TMDB known_for entry (movie or TV)."""
        return cls(title=resolve_title(data))


@dataclass(frozen=True)
class FilmographyEntry:
    """Single credited work in a person's filmography."""

    title: str

    @classmethod
    def from_tmdb(cls, data: dict) -> "FilmographyEntry":
        """Create from a TMDB cast credit."""
        return cls(title=resolve_title(data))


@dataclass(frozen=True)
class PersonSummary:
    """Compact person record shown on a result card."""

    id: int
    name: str
    profile_path: Optional[str] = None
    popularity: Optional[float] = None
    known_for: Optional[List[KnownForItem]] = None

    @classmethod
    def from_tmdb(cls, data: dict) -> "PersonSummary":
        """
        Create PersonSummary from one element of a /search/person response.

        Raises:
            KeyError: If the element has no 'id'.
            TypeError: If the element is not an object.
        """
        known_for = data.get("known_for")
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            profile_path=data.get("profile_path"),
            popularity=data.get("popularity"),
            known_for=(
                [KnownForItem.from_tmdb(item) for item in known_for]
                if known_for is not None
                else None
            ),
        )


@dataclass(frozen=True)
class PersonDetail(PersonSummary):
    """Person summary plus the titles of their credited works."""

    filmography: List[FilmographyEntry] = field(default_factory=list)

    @classmethod
    def from_summary(
        cls,
        summary: PersonSummary,
        filmography: List[FilmographyEntry],
    ) -> "PersonDetail":
        """Combine a resolved summary with its filmography."""
        return cls(
            id=summary.id,
            name=summary.name,
            profile_path=summary.profile_path,
            popularity=summary.popularity,
            known_for=summary.known_for,
            filmography=list(filmography),
        )


@dataclass(frozen=True)
class NotFound:
    """Outcome of a detail load whose name resolved to nobody."""

    name: str
    reason: Optional[ActorSearchError] = None


@dataclass(frozen=True)
class ResultSet:
    """
    Ordered search results, possibly empty.

    An empty set is a normal outcome. When it is empty because something
    failed, ``error`` holds the reason so the caller can tell the user.
    """

    people: List[PersonSummary] = field(default_factory=list)
    query: str = ""
    error: Optional[ActorSearchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[PersonSummary]:
        return iter(self.people)

    def __bool__(self) -> bool:
        return bool(self.people)
