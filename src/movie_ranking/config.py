# movie_ranking/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

from dataclasses import dataclass
from os import getenv
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)


DEFAULT_OMDB_BASE_URL = "https://www.omdbapi.com/"


@dataclass(frozen=True, slots=True)
class Bounds:
    """Domain extremes used to normalise distance penalties."""

    max_year: int = 2024
    min_year: int = 1888
    min_runtime: int = 0
    min_rotten_tomatoes: int = 0
    min_rating: int = 0
    max_rating: int = 4


DEFAULT_BOUNDS = Bounds()


def get_project_root() -> Path:
    """Return the project root directory.

    Prefers MOVIE_RANKING_PROJECT_ROOT env var. Falls back to current working
    directory.
    """
    if root := getenv("MOVIE_RANKING_PROJECT_ROOT"):
        return Path(root).resolve()
    return Path.cwd()


def _int_from_env(name: str, default: int) -> int:
    raw = getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}."
        raise ValueError(msg) from None


def load_bounds() -> Bounds:
    """Build Bounds from MOVIE_RANKING_* env vars, defaulting each field."""
    return Bounds(
        max_year=_int_from_env("MOVIE_RANKING_MAX_YEAR", DEFAULT_BOUNDS.max_year),
        min_year=_int_from_env("MOVIE_RANKING_MIN_YEAR", DEFAULT_BOUNDS.min_year),
        min_runtime=_int_from_env(
            "MOVIE_RANKING_MIN_RUNTIME", DEFAULT_BOUNDS.min_runtime
        ),
        min_rotten_tomatoes=_int_from_env(
            "MOVIE_RANKING_MIN_ROTTEN_TOMATOES", DEFAULT_BOUNDS.min_rotten_tomatoes
        ),
        min_rating=_int_from_env("MOVIE_RANKING_MIN_RATING", DEFAULT_BOUNDS.min_rating),
        max_rating=_int_from_env("MOVIE_RANKING_MAX_RATING", DEFAULT_BOUNDS.max_rating),
    )


def get_omdb_api_key() -> str | None:
    return getenv("OMDB_API_KEY") or None


def get_omdb_base_url() -> str:
    return getenv("OMDB_BASE_URL") or DEFAULT_OMDB_BASE_URL
