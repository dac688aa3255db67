# movie_ranking/scoring/group.py

"""Group-level statistics over the per-person scores of a movie."""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from enum import Enum
from typing import Iterable, Sequence

from movie_ranking.config import DEFAULT_BOUNDS, Bounds
from movie_ranking.domain.models import Movie, Person
from movie_ranking.scoring.person import points_for_person, score_for_person
from movie_ranking.scoring.preferences import PenaltyMode

logger = logging.getLogger(__name__)


class AggregationMode(str, Enum):
    MEDIAN = "median"
    AVERAGE = "average"
    POINTS = "points"


def median(values: Iterable[float]) -> float:
    """Median of `values`; 0 for an empty input."""
    ordered = sorted(values)
    length = len(ordered)

    if length == 0:
        return 0.0
    if length % 2 == 1:
        return ordered[length // 2]
    return (ordered[length // 2 - 1] + ordered[length // 2]) / 2


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of `values`; 0 for an empty input."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def _proportions(
    movie: Movie,
    people: Sequence[Person],
    penalty_mode: PenaltyMode,
    bounds: Bounds,
) -> list[float]:
    return [score_for_person(movie, person, penalty_mode, bounds) for person in people]


def median_proportion(
    movie: Movie,
    people: Sequence[Person],
    penalty_mode: PenaltyMode = PenaltyMode.FLAT,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> float:
    return median(_proportions(movie, people, penalty_mode, bounds))


def average_proportion(
    movie: Movie,
    people: Sequence[Person],
    penalty_mode: PenaltyMode = PenaltyMode.FLAT,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> float:
    return mean(_proportions(movie, people, penalty_mode, bounds))


def aggregate(
    movie: Movie,
    people: Sequence[Person],
    mode: AggregationMode,
    penalty_mode: PenaltyMode = PenaltyMode.FLAT,
    bounds: Bounds = DEFAULT_BOUNDS,
) -> float:
    """Reduce the group's proportions for one movie to a single statistic."""
    if mode is AggregationMode.MEDIAN:
        return median_proportion(movie, people, penalty_mode, bounds)
    if mode is AggregationMode.AVERAGE:
        return average_proportion(movie, people, penalty_mode, bounds)

    msg = f"Aggregation mode {mode.value!r} is not a per-movie statistic."
    raise ValueError(msg)


class PointsAccumulator:
    """Thread-safe running point total for one movie."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0

    def add(self, points: int) -> None:
        with self._lock:
            self._total += points

    @property
    def total(self) -> int:
        with self._lock:
            return self._total


def accumulate_points(
    movies: Sequence[Movie],
    people: Sequence[Person],
    *,
    bounds: Bounds = DEFAULT_BOUNDS,
    max_workers: int | None = None,
) -> dict[str, int]:
    """Score every (movie, person) pair concurrently and sum per movie.

    Each movie's `points` field is set once all pairs have finished, so no
    caller ever sees a partial sum. Returns a mapping of movie IDs to
    totals. Exceptions raised while scoring a pair propagate to the caller.
    """
    accumulators = [PointsAccumulator() for _ in movies]

    def _score(index: int, person: Person) -> None:
        accumulators[index].add(points_for_person(movies[index], person, bounds))

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_score, index, person)
            for index in range(len(movies))
            for person in people
        ]
        for future in concurrent.futures.as_completed(futures):
            future.result()

    totals: dict[str, int] = {}
    for movie, accumulator in zip(movies, accumulators):
        movie.points = accumulator.total
        totals[movie.id] = movie.points
        logger.debug("Movie %s scored %s points.", movie.id, movie.points)

    return totals
