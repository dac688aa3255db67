# movie_ranking/catalog/client.py

from __future__ import annotations

import logging
import random
import time
from typing import Any

import httpx

from movie_ranking.config import get_omdb_api_key, get_omdb_base_url
from movie_ranking.domain.models import Movie

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 3
ROTTEN_TOMATOES_SOURCE = "Rotten Tomatoes"


class MovieDataError(ValueError):
    """Raised when a catalog record cannot be turned into a Movie."""


class OmdbClient:
    """HTTP client for fetching movie records from the OMDb API."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if max_retries < 0:
            msg = "max_retries must be non-negative."
            raise ValueError(msg)

        api_key = api_key or get_omdb_api_key()
        if not api_key:
            msg = "OMDB_API_KEY environment variable is not set."
            raise RuntimeError(msg)

        self._api_key = api_key
        self._base_url = base_url or get_omdb_base_url()
        self._max_retries = max_retries

        self._client = httpx.Client(
            headers={"Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "OmdbClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def fetch_raw(self, movie_id: str) -> dict[str, Any] | None:
        """Fetch the raw OMDb record for an IMDb ID.

        Returns:
            The decoded JSON object, or None if OMDb reports the ID as
            unknown or if all retries failed.

        Notes:
            - 5xx errors and network issues are retried up to `max_retries`.
            - Other HTTP errors are not retried.
        """
        params = {"apikey": self._api_key, "i": movie_id}

        for attempt in range(1, self._max_retries + 2):
            try:
                response = self._client.get(self._base_url, params=params)
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                # Retry only on 5xx errors.
                if 500 <= status < 600 and attempt <= self._max_retries:
                    logger.warning(
                        "Server error for movie %s (status=%s, attempt=%s/%s). "
                        "Retrying...",
                        movie_id,
                        status,
                        attempt,
                        self._max_retries,
                    )
                    _sleep_backoff(attempt)
                    continue

                logger.error(
                    "Unrecoverable HTTP error for movie %s (status=%s): %s",
                    movie_id,
                    status,
                    exc,
                )
                return None
            except httpx.RequestError as exc:
                if attempt <= self._max_retries:
                    logger.warning(
                        "Request error for movie %s (attempt=%s/%s): %s. Retrying...",
                        movie_id,
                        attempt,
                        self._max_retries,
                        exc,
                    )
                    _sleep_backoff(attempt)
                    continue

                logger.error(
                    "Request error for movie %s after %s attempts: %s",
                    movie_id,
                    attempt - 1,
                    exc,
                )
                return None
            except ValueError as exc:
                logger.error("Invalid JSON for movie %s: %s", movie_id, exc)
                return None

            if not isinstance(data, dict) or data.get("Response") == "False":
                error = data.get("Error") if isinstance(data, dict) else None
                logger.error("OMDb has no record for %s: %s", movie_id, error)
                return None

            logger.debug("Fetched movie %s (status=%s).", movie_id, response.status_code)
            return data

        return None

    def fetch_movie(self, movie_id: str) -> Movie | None:
        """Fetch and parse a single movie; None if it could not be fetched."""
        raw = self.fetch_raw(movie_id)
        if raw is None:
            return None
        return movie_from_omdb(movie_id, raw)


def _non_negative_int(value: str, field_name: str, movie_id: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        msg = f"Cannot parse {field_name} {value!r} of movie {movie_id}."
        raise MovieDataError(msg) from None
    if number < 0:
        msg = f"{field_name} of movie {movie_id} is negative."
        raise MovieDataError(msg)
    return number


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return value.split(", ")


def movie_from_omdb(movie_id: str, raw: dict[str, Any]) -> Movie:
    """Convert an OMDb record into a Movie.

    Raises:
        MovieDataError: If year, runtime or the Rotten Tomatoes score are
            missing, negative or unparseable.
    """
    year = _non_negative_int(raw.get("Year", ""), "Year", movie_id)
    runtime = _non_negative_int(
        str(raw.get("Runtime", "")).removesuffix(" min"), "Runtime", movie_id
    )

    rotten_tomatoes: int | None = None
    for rating in raw.get("Ratings") or []:
        if rating.get("Source") == ROTTEN_TOMATOES_SOURCE:
            rotten_tomatoes = _non_negative_int(
                str(rating.get("Value", "")).removesuffix("%"),
                "Rotten Tomatoes score",
                movie_id,
            )
            break

    if rotten_tomatoes is None:
        msg = f"Rotten Tomatoes score not found for movie {movie_id}."
        raise MovieDataError(msg)

    return Movie(
        id=movie_id,
        title=raw.get("Title", ""),
        year=year,
        rated=raw.get("Rated", ""),
        runtime=runtime,
        genres=_split_list(raw.get("Genre")),
        director=raw.get("Director", ""),
        actors=_split_list(raw.get("Actors")),
        plot=raw.get("Plot", ""),
        rotten_tomatoes=rotten_tomatoes,
    )


def _sleep_backoff(attempt: int) -> None:
    """Sleep for a short exponential backoff based on the attempt number."""
    base = 0.5
    max_sleep = 5.0
    delay = min(max_sleep, base * (2 ** (attempt - 1)))
    jitter = random.uniform(0.0, 0.25 * delay)
    time.sleep(delay + jitter)
