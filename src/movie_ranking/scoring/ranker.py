# movie_ranking/scoring/ranker.py

"""Final ordering of movies by the group statistic."""

from __future__ import annotations

import logging
from typing import Sequence

from movie_ranking.config import DEFAULT_BOUNDS, Bounds
from movie_ranking.domain.models import Movie, Person
from movie_ranking.scoring.group import (
    AggregationMode,
    accumulate_points,
    aggregate,
)
from movie_ranking.scoring.preferences import PenaltyMode

logger = logging.getLogger(__name__)


def statistic_of(movie: Movie, mode: AggregationMode) -> float:
    """Return the statistic attached to `movie` for `mode` (0 if unset)."""
    if mode is AggregationMode.MEDIAN:
        value: float | None = movie.median_proportion
    elif mode is AggregationMode.AVERAGE:
        value = movie.average_proportion
    else:
        value = movie.points
    return 0.0 if value is None else value


def rank(
    movies: Sequence[Movie],
    people: Sequence[Person],
    mode: AggregationMode = AggregationMode.MEDIAN,
    penalty_mode: PenaltyMode = PenaltyMode.DISTANCE,
    bounds: Bounds = DEFAULT_BOUNDS,
    *,
    max_workers: int | None = None,
) -> list[Movie]:
    """Attach the group statistic to each movie and sort, best first.

    The sort is stable, so movies with equal statistics keep their input
    order. `penalty_mode` is ignored in points mode.
    """
    if mode is AggregationMode.POINTS:
        accumulate_points(movies, people, bounds=bounds, max_workers=max_workers)
    else:
        for movie in movies:
            value = aggregate(movie, people, mode, penalty_mode, bounds)
            if mode is AggregationMode.MEDIAN:
                movie.median_proportion = value
            else:
                movie.average_proportion = value
            logger.debug("Movie %s: %s proportion %.4f.", movie.id, mode.value, value)

    return sorted(movies, key=lambda m: statistic_of(m, mode), reverse=True)
