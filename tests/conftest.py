"""Shared movie and people fixtures."""

from __future__ import annotations

import pytest

from movie_ranking.domain.models import Movie, Person, Preference, Preferences


@pytest.fixture
def good_movie() -> Movie:
    return Movie(
        id="good",
        title="Good Movie",
        year=2005,
        rated="PG-13",
        runtime=100,
        genres=["Action", "Comedy", "Drama"],
        director="Aaron Kim",
        actors=["Robert Pattinson", "Josh Brolin", "Chris Evans"],
        plot="this is a movie about family, war, and love",
        rotten_tomatoes=85,
    )


@pytest.fixture
def bad_movie() -> Movie:
    return Movie(
        id="bad",
        title="Bad Movie",
        year=1990,
        rated="R",
        runtime=120,
        genres=["Thriller", "Horror"],
        director="Ridley Scott",
        actors=["Kevin Durant", "Jon Jones", "Dana White"],
        plot="this is a documentary about history",
        rotten_tomatoes=60,
    )


@pytest.fixture
def mixed_movie() -> Movie:
    return Movie(
        id="mixed",
        title="Mixed Movie",
        year=2012,
        rated="PG",
        runtime=95,
        genres=["Comedy", "Horror"],
        director="Ridley Scott",
        actors=["Chris Evans", "Dana White"],
        plot="a story about love and war",
        rotten_tomatoes=72,
    )


@pytest.fixture
def full_preferences() -> Preferences:
    return Preferences(
        after_year_inclusive=Preference(2000, 10),
        before_year_exclusive=Preference(2010, 10),
        maximum_age_rating_inclusive=Preference("PG-13", 10),
        shorter_than_exclusive=Preference("1h45m0s", 10),
        favorite_genre=Preference("Action", 10),
        least_favorite_director=Preference("Ridley Scott", 10),
        favorite_actors=Preference(["Chris Evans", "Josh Brolin"], 10),
        favorite_plot_elements=Preference(["love", "family"], 10),
        minimum_rotten_tomatoes_score_inclusive=Preference(70, 10),
    )


@pytest.fixture
def people(full_preferences: Preferences) -> list[Person]:
    return [
        Person(name="Alex", preferences=full_preferences),
        Person(
            name="Blair",
            preferences=Preferences(
                before_year_exclusive=Preference(2000, 10),
                favorite_genre=Preference("Horror", 10),
                minimum_rotten_tomatoes_score_inclusive=Preference(50, 10),
            ),
        ),
        Person(
            name="Casey",
            preferences=Preferences(
                least_favorite_director=Preference("Ridley Scott", 20),
                favorite_actors=Preference(["Chris Evans"], 30),
                favorite_plot_elements=Preference(["war"], 40),
            ),
        ),
    ]
