# movie_ranking/scoring/person.py

"""Per-person satisfaction: normalised proportion and integer points."""

from __future__ import annotations

from movie_ranking.config import DEFAULT_BOUNDS, Bounds
from movie_ranking.domain.models import Movie, Person, PreferenceKind
from movie_ranking.scoring.preferences import (
    PenaltyMode,
    count_favorite_actors,
    count_favorite_plot_elements,
    evaluate,
)


def score_for_person(
    movie: Movie,
    person: Person,
    penalty_mode: PenaltyMode = PenaltyMode.FLAT,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> float:
    """Return how satisfied `person` is with `movie`, as a proportion.

    The signed satisfaction total lies in [-total_weight, total_weight]
    (outside it only for unclamped distance penalties); it is mapped onto
    [0, 1] by adding total_weight and dividing by 2 * total_weight.
    People without any weighted preference score 0.
    """
    total_sat = 0.0
    total_weight = 0

    for kind, preference in person.present_preferences():
        evaluation = evaluate(kind, preference, movie, penalty_mode, bounds)
        total_sat += evaluation.satisfaction
        total_weight += evaluation.weight

    if total_weight == 0:
        return 0.0

    return (total_sat + total_weight) / (2 * total_weight)


def points_for_person(
    movie: Movie,
    person: Person,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> int:
    """Return the unnormalised points `person` awards to `movie`.

    Met preferences add their weight and unmet ones add nothing, except the
    least favorite director, which only ever subtracts. Favorite actors and
    plot elements add their weight once per match.
    """
    total = 0

    for kind, preference in person.present_preferences():
        weight = preference.weight

        if kind is PreferenceKind.FAVORITE_ACTORS:
            total += count_favorite_actors(movie.actors, preference.value) * weight
        elif kind is PreferenceKind.FAVORITE_PLOT_ELEMENTS:
            total += count_favorite_plot_elements(movie.plot, preference.value) * weight
        elif kind is PreferenceKind.LEAST_FAVORITE_DIRECTOR:
            if movie.director == preference.value:
                total -= weight
        elif evaluate(kind, preference, movie, PenaltyMode.FLAT, bounds).satisfied:
            total += weight

    return total
