# movie_ranking/domain/runtime.py

"""Parsing of `<H>h<M>m<S>s` duration strings."""

from __future__ import annotations

import re

_DURATION_RE = re.compile(r"([0-9]+)h([0-9]+)m([0-9]+)s")


class MalformedDurationError(ValueError):
    """Raised when a duration string is not of the form `<H>h<M>m<S>s`."""


def parse_runtime(text: str) -> float:
    """Convert a duration such as "2h12m30s" into (fractional) minutes."""
    match = _DURATION_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        msg = f"Malformed duration {text!r}, expected '<H>h<M>m<S>s'."
        raise MalformedDurationError(msg)

    hours, minutes, seconds = (int(group) for group in match.groups())
    return 60 * hours + minutes + seconds / 60
