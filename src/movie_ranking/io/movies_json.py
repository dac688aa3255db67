# movie_ranking/io/movies_json.py

"""Read/write the on-disk movie cache (an indented JSON array)."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from movie_ranking.domain.models import Movie


def movie_from_raw(raw: dict[str, Any]) -> Movie:
    """Convert a raw JSON dict into a Movie instance."""
    return Movie(
        id=str(raw["id"]),
        title=raw.get("title", ""),
        year=int(raw.get("year", 0)),
        rated=raw.get("rated", ""),
        runtime=int(raw.get("runtime", 0)),
        genres=list(raw.get("genres", [])),
        director=raw.get("director", ""),
        actors=list(raw.get("actors", [])),
        plot=raw.get("plot", ""),
        rotten_tomatoes=int(raw.get("rotten_tomatoes", 0)),
    )


def movie_to_raw(movie: Movie) -> dict[str, Any]:
    """Convert a Movie into a JSON-serialisable dict (scores are not stored)."""
    return {
        "id": movie.id,
        "title": movie.title,
        "year": movie.year,
        "rated": movie.rated,
        "runtime": movie.runtime,
        "genres": movie.genres,
        "director": movie.director,
        "actors": movie.actors,
        "plot": movie.plot,
        "rotten_tomatoes": movie.rotten_tomatoes,
    }


def load_movies(path: str | Path) -> list[Movie]:
    """Load movies from a cache file written by `save_movies`."""
    file_path = Path(path)

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        msg = f"Movie cache {file_path} must contain a JSON array."
        raise ValueError(msg)

    return [movie_from_raw(raw) for raw in data]


def save_movies(movies: Iterable[Movie], path: str | Path) -> None:
    """Write movies to the cache file, replacing its content."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as f:
        json.dump(
            [movie_to_raw(movie) for movie in movies],
            f,
            ensure_ascii=False,
            indent=2,
        )
        f.write("\n")
