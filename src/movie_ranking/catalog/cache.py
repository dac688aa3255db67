# movie_ranking/catalog/cache.py

"""Movie lookup backed by a local JSON cache keyed by movie ID."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from movie_ranking.catalog.client import OmdbClient
from movie_ranking.domain.models import Movie
from movie_ranking.io.movies_json import load_movies, save_movies

logger = logging.getLogger(__name__)

DEFAULT_CACHE_PATH = Path("data/movies.json")


class CatalogError(RuntimeError):
    """Raised when requested movies cannot be obtained from cache or catalog."""


def load_cache(path: Path) -> dict[str, Movie]:
    """Load the cache into an ID-to-Movie mapping; empty if the file is missing."""
    if not path.exists():
        return {}
    return {movie.id: movie for movie in load_movies(path)}


def fetch_movies(
    ids: Sequence[str],
    cache_path: Path | str = DEFAULT_CACHE_PATH,
    client: OmdbClient | None = None,
) -> list[Movie]:
    """Return movies for `ids` in request order, fetching only cache misses.

    When anything new was fetched the cache file is rewritten with the old
    and new entries. A client is created from the environment if needed and
    none was given.

    Raises:
        CatalogError: If a movie is neither cached nor fetchable.
    """
    path = Path(cache_path)
    cached = load_cache(path)

    unique_ids = list(dict.fromkeys(ids))
    missing = [movie_id for movie_id in unique_ids if movie_id not in cached]
    logger.info(
        "Movie cache %s: %s hits, %s misses.",
        path,
        len(unique_ids) - len(missing),
        len(missing),
    )

    if missing:
        owns_client = client is None
        active = client if client is not None else OmdbClient()
        fetched = 0
        try:
            for movie_id in missing:
                movie = active.fetch_movie(movie_id)
                if movie is None:
                    msg = f"Could not fetch movie {movie_id} from the catalog."
                    raise CatalogError(msg)
                cached[movie_id] = movie
                fetched += 1
        finally:
            if owns_client:
                active.close()
            # Keep whatever was fetched, even if a later ID failed.
            if fetched:
                save_movies(cached.values(), path)
                logger.info("Wrote %s movies to cache %s.", len(cached), path)

    return [cached[movie_id] for movie_id in ids]
