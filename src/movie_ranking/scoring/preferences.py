# movie_ranking/scoring/preferences.py

"""Evaluation of a single preference against a single movie.

Every preference kind maps to one evaluator in `_EVALUATORS`. An evaluator
returns whether the movie satisfies the preference, a signed satisfaction
value and the preference weight. How unmet numeric or ordinal preferences
are penalised depends on the `PenaltyMode`:

    FLAT      unmet preferences score -weight
    DISTANCE  unmet preferences score -weight * |actual - edge| / |bound - edge|

Distance penalties are not clamped, so an attribute that lies beyond the
configured bound scores below -weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from movie_ranking.config import DEFAULT_BOUNDS, Bounds
from movie_ranking.domain.models import Movie, Preference, PreferenceKind, rating_rank
from movie_ranking.domain.runtime import parse_runtime


class PenaltyMode(str, Enum):
    FLAT = "flat"
    DISTANCE = "distance"


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of evaluating one preference for one movie."""

    satisfied: bool
    satisfaction: float
    weight: int


Evaluator = Callable[[Movie, Preference[Any], PenaltyMode, Bounds], Evaluation]


# ---------------------------------------------------------------------------
# Predicates and match helpers
# ---------------------------------------------------------------------------


def is_after_year_inclusive(movie_year: int, pref_year: int) -> bool:
    return movie_year >= pref_year


def is_before_year_exclusive(movie_year: int, pref_year: int) -> bool:
    return movie_year < pref_year


def is_maximum_age_rating_inclusive(movie_rating: str, pref_rating: str) -> bool:
    return rating_rank(movie_rating) <= rating_rank(pref_rating)


def is_shorter_than_exclusive(movie_runtime: float, pref_runtime: float) -> bool:
    return movie_runtime < pref_runtime


def is_favorite_genre(movie_genres: list[str], pref_genre: str) -> bool:
    return pref_genre in movie_genres


def is_least_favorite_director(movie_director: str, pref_director: str) -> bool:
    return movie_director == pref_director


def is_minimum_rotten_tomatoes_score_inclusive(movie_score: int, pref_score: int) -> bool:
    return movie_score >= pref_score


def count_favorite_actors(movie_actors: list[str], pref_actors: list[str]) -> int:
    """Number of preferred actors (duplicates counted) appearing in the cast."""
    cast = set(movie_actors)
    return sum(1 for actor in pref_actors if actor in cast)


def count_favorite_plot_elements(movie_plot: str, pref_elements: list[str]) -> int:
    """Number of preferred elements that occur verbatim in the plot."""
    return sum(1 for element in pref_elements if element in movie_plot)


def ratio_favorite_actors(movie_actors: list[str], pref_actors: list[str]) -> float:
    if not pref_actors:
        return 0.0
    return count_favorite_actors(movie_actors, pref_actors) / len(pref_actors)


def ratio_favorite_plot_elements(movie_plot: str, pref_elements: list[str]) -> float:
    if not pref_elements:
        return 0.0
    return count_favorite_plot_elements(movie_plot, pref_elements) / len(pref_elements)


def calc_diff_penalty(actual: float, pref: float, bound: float, weight: float) -> float:
    """Penalty proportional to how far `actual` is from the satisfied edge `pref`.

    Returns -weight when `pref` coincides with `bound`.
    """
    span = abs(bound - pref)
    if span == 0:
        return -float(weight)
    return -1 * weight * (abs(actual - pref) / span)


# ---------------------------------------------------------------------------
# Evaluators
# ---------------------------------------------------------------------------


def _binary(satisfied: bool, weight: int) -> Evaluation:
    return Evaluation(satisfied, float(weight) if satisfied else -float(weight), weight)


def _graduated(
    satisfied: bool,
    weight: int,
    mode: PenaltyMode,
    *,
    actual: float,
    edge: float,
    bound: float,
) -> Evaluation:
    if satisfied or mode is PenaltyMode.FLAT:
        return _binary(satisfied, weight)
    return Evaluation(False, calc_diff_penalty(actual, edge, bound, weight), weight)


def _ratio(ratio: float, weight: int) -> Evaluation:
    if ratio > 0:
        return Evaluation(True, ratio * weight, weight)
    return Evaluation(False, -float(weight), weight)


def _eval_after_year(
    movie: Movie, pref: Preference[int], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _graduated(
        is_after_year_inclusive(movie.year, pref.value),
        pref.weight,
        mode,
        actual=movie.year,
        edge=pref.value,
        bound=bounds.min_year,
    )


def _eval_before_year(
    movie: Movie, pref: Preference[int], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    # The last satisfying year is threshold - 1.
    return _graduated(
        is_before_year_exclusive(movie.year, pref.value),
        pref.weight,
        mode,
        actual=movie.year,
        edge=pref.value - 1,
        bound=bounds.max_year,
    )


def _eval_maximum_age_rating(
    movie: Movie, pref: Preference[str], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _graduated(
        is_maximum_age_rating_inclusive(movie.rated, pref.value),
        pref.weight,
        mode,
        actual=rating_rank(movie.rated),
        edge=rating_rank(pref.value),
        bound=bounds.max_rating,
    )


def _eval_shorter_than(
    movie: Movie, pref: Preference[str], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    pref_runtime = parse_runtime(pref.value)
    return _graduated(
        is_shorter_than_exclusive(movie.runtime, pref_runtime),
        pref.weight,
        mode,
        actual=movie.runtime,
        edge=pref_runtime - 1,
        bound=bounds.min_runtime,
    )


def _eval_favorite_genre(
    movie: Movie, pref: Preference[str], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _binary(is_favorite_genre(movie.genres, pref.value), pref.weight)


def _eval_least_favorite_director(
    movie: Movie, pref: Preference[str], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _binary(not is_least_favorite_director(movie.director, pref.value), pref.weight)


def _eval_favorite_actors(
    movie: Movie, pref: Preference[list[str]], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _ratio(ratio_favorite_actors(movie.actors, pref.value), pref.weight)


def _eval_favorite_plot_elements(
    movie: Movie, pref: Preference[list[str]], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _ratio(ratio_favorite_plot_elements(movie.plot, pref.value), pref.weight)


def _eval_minimum_rotten_tomatoes(
    movie: Movie, pref: Preference[int], mode: PenaltyMode, bounds: Bounds
) -> Evaluation:
    return _graduated(
        is_minimum_rotten_tomatoes_score_inclusive(movie.rotten_tomatoes, pref.value),
        pref.weight,
        mode,
        actual=movie.rotten_tomatoes,
        edge=pref.value,
        bound=bounds.min_rotten_tomatoes,
    )


_EVALUATORS: dict[PreferenceKind, Evaluator] = {
    PreferenceKind.AFTER_YEAR_INCLUSIVE: _eval_after_year,
    PreferenceKind.BEFORE_YEAR_EXCLUSIVE: _eval_before_year,
    PreferenceKind.MAXIMUM_AGE_RATING_INCLUSIVE: _eval_maximum_age_rating,
    PreferenceKind.SHORTER_THAN_EXCLUSIVE: _eval_shorter_than,
    PreferenceKind.FAVORITE_GENRE: _eval_favorite_genre,
    PreferenceKind.LEAST_FAVORITE_DIRECTOR: _eval_least_favorite_director,
    PreferenceKind.FAVORITE_ACTORS: _eval_favorite_actors,
    PreferenceKind.FAVORITE_PLOT_ELEMENTS: _eval_favorite_plot_elements,
    PreferenceKind.MINIMUM_ROTTEN_TOMATOES_SCORE_INCLUSIVE: _eval_minimum_rotten_tomatoes,
}


def evaluate(
    kind: PreferenceKind,
    preference: Preference[Any],
    movie: Movie,
    penalty_mode: PenaltyMode = PenaltyMode.FLAT,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> Evaluation:
    """Evaluate one preference of the given kind against a movie.

    Raises:
        MalformedDurationError: If a shorterThan preference holds an invalid
            duration string.
    """
    return _EVALUATORS[kind](movie, preference, penalty_mode, bounds)
