# movie_ranking/io/challenge.py

"""Loading of the challenge document: movie IDs plus the people to please."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from movie_ranking.domain.models import Person, Preference, PreferenceKind, Preferences

logger = logging.getLogger(__name__)

# Preferences field for each document key.
_SLOT_ATTRIBUTES: dict[PreferenceKind, str] = {
    PreferenceKind.AFTER_YEAR_INCLUSIVE: "after_year_inclusive",
    PreferenceKind.BEFORE_YEAR_EXCLUSIVE: "before_year_exclusive",
    PreferenceKind.MAXIMUM_AGE_RATING_INCLUSIVE: "maximum_age_rating_inclusive",
    PreferenceKind.SHORTER_THAN_EXCLUSIVE: "shorter_than_exclusive",
    PreferenceKind.FAVORITE_GENRE: "favorite_genre",
    PreferenceKind.LEAST_FAVORITE_DIRECTOR: "least_favorite_director",
    PreferenceKind.FAVORITE_ACTORS: "favorite_actors",
    PreferenceKind.FAVORITE_PLOT_ELEMENTS: "favorite_plot_elements",
    PreferenceKind.MINIMUM_ROTTEN_TOMATOES_SCORE_INCLUSIVE: (
        "minimum_rotten_tomatoes_score_inclusive"
    ),
}

_INT_KINDS = {
    PreferenceKind.AFTER_YEAR_INCLUSIVE,
    PreferenceKind.BEFORE_YEAR_EXCLUSIVE,
    PreferenceKind.MINIMUM_ROTTEN_TOMATOES_SCORE_INCLUSIVE,
}
_LIST_KINDS = {
    PreferenceKind.FAVORITE_ACTORS,
    PreferenceKind.FAVORITE_PLOT_ELEMENTS,
}


@dataclass(slots=True)
class Challenge:
    """A ranking request."""

    token: str
    movie_ids: list[str] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)


def _preference_from_raw(kind: PreferenceKind, raw: Any) -> Preference[Any]:
    if not isinstance(raw, dict):
        msg = f"Invalid preference {kind.value!r}: {raw!r}"
        raise ValueError(msg)

    value = raw.get("value")
    try:
        if kind in _INT_KINDS:
            value = int(value)
        elif kind in _LIST_KINDS:
            value = [str(v) for v in value or []]
        else:
            value = "" if value is None else str(value)
        # A null weight counts as 0, like a missing one.
        weight = int(raw.get("weight") or 0)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid preference {kind.value!r}: {raw!r}"
        raise ValueError(msg) from exc

    if weight < 0:
        msg = f"Weight of {kind.value!r} must be non-negative, got {weight}."
        raise ValueError(msg)

    return Preference(value=value, weight=weight)


def preferences_from_raw(raw: dict[str, Any] | None) -> Preferences:
    """Build a Preferences bundle; null or missing slots stay unset."""
    preferences = Preferences()
    if raw is None:
        return preferences
    if not isinstance(raw, dict):
        msg = f"Preferences must be a JSON object, got {raw!r}."
        raise ValueError(msg)

    for key, slot in raw.items():
        try:
            kind = PreferenceKind(key)
        except ValueError:
            logger.warning("Ignoring unknown preference %r.", key)
            continue
        if slot is None:
            continue
        setattr(preferences, _SLOT_ATTRIBUTES[kind], _preference_from_raw(kind, slot))

    return preferences


def person_from_raw(raw: dict[str, Any]) -> Person:
    if not isinstance(raw, dict):
        msg = f"Invalid person entry: {raw!r}"
        raise ValueError(msg)

    return Person(
        name=raw.get("name", ""),
        preferences=preferences_from_raw(raw.get("preferences")),
    )


def challenge_from_raw(raw: dict[str, Any]) -> Challenge:
    """Convert a raw challenge document into a Challenge instance."""
    prompt = raw.get("prompt") if isinstance(raw, dict) else None
    if not isinstance(prompt, dict):
        msg = "Challenge document has no 'prompt' object."
        raise ValueError(msg)

    return Challenge(
        token=raw.get("token", ""),
        movie_ids=[str(movie_id) for movie_id in prompt.get("movies", [])],
        people=[person_from_raw(p) for p in prompt.get("people", [])],
    )


def load_challenge(path: str | Path) -> Challenge:
    """Load a challenge document from a JSON file."""
    file_path = Path(path)

    with file_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    challenge = challenge_from_raw(raw)
    logger.info(
        "Loaded challenge from %s with %s movies and %s people.",
        file_path,
        len(challenge.movie_ids),
        len(challenge.people),
    )
    return challenge
