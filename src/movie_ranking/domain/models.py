# movie_ranking/domain/models.py

"""Core domain models for movies, people and their preferences."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

# Content ratings in ascending order of restriction.
RATINGS: dict[str, int] = {
    "G": 0,
    "PG": 1,
    "PG-13": 2,
    "R": 3,
    "NC-17": 4,
}


def rating_rank(label: str) -> int:
    """Return the rank of a content rating; unknown labels rank as "G"."""
    return RATINGS.get(label, 0)


class PreferenceKind(str, Enum):
    """The nine preference slots, valued by their challenge-document keys."""

    AFTER_YEAR_INCLUSIVE = "afterYear(inclusive)"
    BEFORE_YEAR_EXCLUSIVE = "beforeYear(exclusive)"
    MAXIMUM_AGE_RATING_INCLUSIVE = "maximumAgeRating(inclusive)"
    SHORTER_THAN_EXCLUSIVE = "shorterThan(exclusive)"
    FAVORITE_GENRE = "favoriteGenre"
    LEAST_FAVORITE_DIRECTOR = "leastFavoriteDirector"
    FAVORITE_ACTORS = "favoriteActors"
    FAVORITE_PLOT_ELEMENTS = "favoritePlotElements"
    MINIMUM_ROTTEN_TOMATOES_SCORE_INCLUSIVE = "minimumRottenTomatoesScore(inclusive)"


@dataclass(slots=True)
class Movie:
    """A single movie as returned by the catalog."""

    id: str
    title: str = ""
    year: int = 0
    rated: str = ""
    runtime: int = 0  # minutes
    genres: list[str] = field(default_factory=list)
    director: str = ""
    actors: list[str] = field(default_factory=list)
    plot: str = ""
    rotten_tomatoes: int = 0  # percent

    # Written by the ranker, never persisted
    median_proportion: float | None = field(default=None, compare=False)
    average_proportion: float | None = field(default=None, compare=False)
    points: int | None = field(default=None, compare=False)


@dataclass(slots=True)
class Preference(Generic[T]):
    """A preferred value together with how much it matters."""

    value: T
    weight: int = 0


@dataclass(slots=True)
class Preferences:
    """Optional preference slots of a single person."""

    after_year_inclusive: Preference[int] | None = None
    before_year_exclusive: Preference[int] | None = None
    maximum_age_rating_inclusive: Preference[str] | None = None
    shorter_than_exclusive: Preference[str] | None = None
    favorite_genre: Preference[str] | None = None
    least_favorite_director: Preference[str] | None = None
    favorite_actors: Preference[list[str]] | None = None
    favorite_plot_elements: Preference[list[str]] | None = None
    minimum_rotten_tomatoes_score_inclusive: Preference[int] | None = None

    def items(self) -> tuple[tuple[PreferenceKind, Preference[Any] | None], ...]:
        return (
            (PreferenceKind.AFTER_YEAR_INCLUSIVE, self.after_year_inclusive),
            (PreferenceKind.BEFORE_YEAR_EXCLUSIVE, self.before_year_exclusive),
            (
                PreferenceKind.MAXIMUM_AGE_RATING_INCLUSIVE,
                self.maximum_age_rating_inclusive,
            ),
            (PreferenceKind.SHORTER_THAN_EXCLUSIVE, self.shorter_than_exclusive),
            (PreferenceKind.FAVORITE_GENRE, self.favorite_genre),
            (PreferenceKind.LEAST_FAVORITE_DIRECTOR, self.least_favorite_director),
            (PreferenceKind.FAVORITE_ACTORS, self.favorite_actors),
            (PreferenceKind.FAVORITE_PLOT_ELEMENTS, self.favorite_plot_elements),
            (
                PreferenceKind.MINIMUM_ROTTEN_TOMATOES_SCORE_INCLUSIVE,
                self.minimum_rotten_tomatoes_score_inclusive,
            ),
        )

    def present(self) -> Iterator[tuple[PreferenceKind, Preference[Any]]]:
        """Yield (kind, preference) for every slot that is set, in slot order."""
        for kind, preference in self.items():
            if preference is not None:
                yield kind, preference


@dataclass(slots=True)
class Person:
    """A member of the group, with an optional preference bundle."""

    name: str
    preferences: Preferences | None = None

    def present_preferences(self) -> Iterator[tuple[PreferenceKind, Preference[Any]]]:
        if self.preferences is None:
            return iter(())
        return self.preferences.present()
