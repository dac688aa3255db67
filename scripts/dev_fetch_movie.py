#!/usr/bin/env python3
"""Manual script to test an OMDb movie lookup (needs OMDB_API_KEY)."""

from movie_ranking.catalog.client import OmdbClient

if __name__ == "__main__":
    with OmdbClient() as client:
        print(client.fetch_movie("tt0468569"))
