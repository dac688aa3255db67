"""Tests for the movie-ranking command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from movie_ranking.cli import main
from movie_ranking.domain.models import Movie
from movie_ranking.io.movies_json import save_movies

PEOPLE = [
    {
        "name": "Alex",
        "preferences": {
            "afterYear(inclusive)": {"value": 2000, "weight": 10},
            "beforeYear(exclusive)": {"value": 2010, "weight": 10},
            "maximumAgeRating(inclusive)": {"value": "PG-13", "weight": 10},
            "shorterThan(exclusive)": {"value": "1h45m0s", "weight": 10},
            "favoriteGenre": {"value": "Action", "weight": 10},
            "leastFavoriteDirector": {"value": "Ridley Scott", "weight": 10},
            "favoriteActors": {"value": ["Chris Evans", "Josh Brolin"], "weight": 10},
            "favoritePlotElements": {"value": ["love", "family"], "weight": 10},
            "minimumRottenTomatoesScore(inclusive)": {"value": 70, "weight": 10},
        },
    },
    {
        "name": "Blair",
        "preferences": {
            "beforeYear(exclusive)": {"value": 2000, "weight": 10},
            "favoriteGenre": {"value": "Horror", "weight": 10},
            "minimumRottenTomatoesScore(inclusive)": {"value": 50, "weight": 10},
        },
    },
    {
        "name": "Casey",
        "preferences": {
            "leastFavoriteDirector": {"value": "Ridley Scott", "weight": 20},
            "favoriteActors": {"value": ["Chris Evans"], "weight": 30},
            "favoritePlotElements": {"value": ["war"], "weight": 40},
        },
    },
]


@pytest.fixture
def workspace(
    tmp_path: Path, good_movie: Movie, bad_movie: Movie, mixed_movie: Movie
) -> tuple[Path, Path]:
    challenge = tmp_path / "response.json"
    challenge.write_text(
        json.dumps({"token": "t", "prompt": {"movies": ["bad", "mixed", "good"], "people": PEOPLE}}),
        encoding="utf-8",
    )
    cache = tmp_path / "movies.json"
    save_movies([good_movie, bad_movie, mixed_movie], cache)
    return challenge, cache


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> list[str]:
    main(list(argv))
    return capsys.readouterr().out.splitlines()


@pytest.mark.parametrize("mode", ["median", "average", "points"])
def test_rank_prints_ids_best_first(
    capsys: pytest.CaptureFixture[str], workspace: tuple[Path, Path], mode: str
) -> None:
    challenge, cache = workspace

    lines = _run(capsys, "rank", "--challenge", str(challenge), "--cache", str(cache), "--mode", mode)

    assert lines == ['"good",', '"mixed",', '"bad",']


def test_rank_show_scores(capsys: pytest.CaptureFixture[str], workspace: tuple[Path, Path]) -> None:
    challenge, cache = workspace

    lines = _run(
        capsys,
        "rank",
        "--challenge",
        str(challenge),
        "--cache",
        str(cache),
        "--mode",
        "points",
        "--show-scores",
    )

    assert lines[0].startswith('"good",  # 180.0000')
    assert lines[2].startswith('"bad",  # 10.0000')


def test_fetch_with_warm_cache(capsys: pytest.CaptureFixture[str], workspace: tuple[Path, Path]) -> None:
    challenge, cache = workspace
    assert _run(capsys, "fetch", "--challenge", str(challenge), "--cache", str(cache)) == []


def test_malformed_duration_exits_with_error(tmp_path: Path, good_movie: Movie) -> None:
    challenge = tmp_path / "response.json"
    person = {"name": "X", "preferences": {"shorterThan(exclusive)": {"value": "long", "weight": 1}}}
    challenge.write_text(
        json.dumps({"token": "t", "prompt": {"movies": ["good"], "people": [person]}}),
        encoding="utf-8",
    )
    cache = tmp_path / "movies.json"
    save_movies([good_movie], cache)

    with pytest.raises(SystemExit) as excinfo:
        main(["rank", "--challenge", str(challenge), "--cache", str(cache)])

    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "people",
    [
        [{"name": "X", "preferences": {"favoriteGenre": "Drama"}}],
        [{"name": "X", "preferences": "Drama"}],
        [None],
    ],
)
def test_malformed_challenge_exits_with_error(
    tmp_path: Path, good_movie: Movie, people: list[object]
) -> None:
    challenge = tmp_path / "response.json"
    challenge.write_text(
        json.dumps({"token": "t", "prompt": {"movies": ["good"], "people": people}}),
        encoding="utf-8",
    )
    cache = tmp_path / "movies.json"
    save_movies([good_movie], cache)

    with pytest.raises(SystemExit) as excinfo:
        main(["rank", "--challenge", str(challenge), "--cache", str(cache)])

    assert excinfo.value.code == 2
