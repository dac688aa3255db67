"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from movie_ranking.config import (
    DEFAULT_BOUNDS,
    DEFAULT_OMDB_BASE_URL,
    Bounds,
    get_omdb_base_url,
    get_project_root,
    load_bounds,
)

BOUND_VARS = [
    "MOVIE_RANKING_MAX_YEAR",
    "MOVIE_RANKING_MIN_YEAR",
    "MOVIE_RANKING_MIN_RUNTIME",
    "MOVIE_RANKING_MIN_ROTTEN_TOMATOES",
    "MOVIE_RANKING_MIN_RATING",
    "MOVIE_RANKING_MAX_RATING",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in BOUND_VARS:
        monkeypatch.delenv(name, raising=False)


def test_default_bounds() -> None:
    assert DEFAULT_BOUNDS == Bounds(
        max_year=2024,
        min_year=1888,
        min_runtime=0,
        min_rotten_tomatoes=0,
        min_rating=0,
        max_rating=4,
    )
    assert load_bounds() == DEFAULT_BOUNDS


def test_load_bounds_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOVIE_RANKING_MAX_YEAR", "2030")
    monkeypatch.setenv("MOVIE_RANKING_MIN_YEAR", " ")

    bounds = load_bounds()

    assert bounds.max_year == 2030
    assert bounds.min_year == 1888


def test_load_bounds_rejects_non_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOVIE_RANKING_MAX_RATING", "four")
    with pytest.raises(ValueError):
        load_bounds()


def test_get_project_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MOVIE_RANKING_PROJECT_ROOT", str(tmp_path))
    assert get_project_root() == tmp_path.resolve()


def test_omdb_base_url_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OMDB_BASE_URL", raising=False)
    assert get_omdb_base_url() == DEFAULT_OMDB_BASE_URL
