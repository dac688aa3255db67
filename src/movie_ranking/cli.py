# movie_ranking/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from movie_ranking.catalog.cache import DEFAULT_CACHE_PATH, CatalogError, fetch_movies
from movie_ranking.catalog.client import MovieDataError
from movie_ranking.config import get_project_root, load_bounds
from movie_ranking.domain.runtime import MalformedDurationError
from movie_ranking.io.challenge import load_challenge
from movie_ranking.scoring.group import AggregationMode
from movie_ranking.scoring.preferences import PenaltyMode
from movie_ranking.scoring.ranker import rank, statistic_of

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the movie-ranking CLI."""
    args = _build_arg_parser().parse_args(argv)

    _configure_logging(verbose=args.verbose)

    try:
        if args.command == "rank":
            _cmd_rank(
                challenge_path=Path(args.challenge),
                cache_path=Path(args.cache),
                mode=AggregationMode(args.mode),
                penalty_mode=PenaltyMode(args.penalty),
                show_scores=args.show_scores,
            )
        elif args.command == "fetch":
            _cmd_fetch(
                challenge_path=Path(args.challenge),
                cache_path=Path(args.cache),
            )
        else:
            msg = f"Unknown command: {args.command}"
            raise ValueError(msg)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)
    except (CatalogError, MovieDataError, MalformedDurationError) as exc:
        logger.error("%s", exc)
        sys.exit(2)
    except (RuntimeError, ValueError) as exc:
        logger.error("Invalid input or configuration: %s", exc)
        sys.exit(2)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movie-ranking",
        description="Rank movies for a group of people by their preferences.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Sub-command to run.",
    )

    # rank: fetch (or load cached) movies and print them best first
    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank the challenge's movies for its people.",
    )
    _add_common_arguments(rank_parser)
    rank_parser.add_argument(
        "--mode",
        choices=[m.value for m in AggregationMode],
        default=AggregationMode.MEDIAN.value,
        help="Group statistic used for ranking (default: %(default)s).",
    )
    rank_parser.add_argument(
        "--penalty",
        choices=[m.value for m in PenaltyMode],
        default=PenaltyMode.DISTANCE.value,
        help="How unmet preferences are penalised (default: %(default)s).",
    )
    rank_parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print the group statistic next to each movie ID.",
    )

    # fetch: only warm the movie cache
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch the challenge's movies into the cache without ranking.",
    )
    _add_common_arguments(fetch_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--challenge",
        default=str(get_project_root() / "response.json"),
        help="Path to the challenge JSON document (default: %(default)s).",
    )
    parser.add_argument(
        "--cache",
        default=str(get_project_root() / DEFAULT_CACHE_PATH),
        help="Path to the movie cache file (default: %(default)s).",
    )


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cmd_rank(
    *,
    challenge_path: Path,
    cache_path: Path,
    mode: AggregationMode,
    penalty_mode: PenaltyMode,
    show_scores: bool,
) -> None:
    challenge = load_challenge(challenge_path)
    movies = fetch_movies(challenge.movie_ids, cache_path)

    logger.info(
        "Ranking %s movies for %s people (mode=%s, penalty=%s).",
        len(movies),
        len(challenge.people),
        mode.value,
        penalty_mode.value,
    )
    ranked = rank(movies, challenge.people, mode, penalty_mode, load_bounds())

    for movie in ranked:
        if show_scores:
            print(f'"{movie.id}",  # {statistic_of(movie, mode):.4f} {movie.title}')
        else:
            print(f'"{movie.id}",')


def _cmd_fetch(*, challenge_path: Path, cache_path: Path) -> None:
    challenge = load_challenge(challenge_path)
    movies = fetch_movies(challenge.movie_ids, cache_path)
    logger.info("Cache %s holds all %s requested movies.", cache_path, len(movies))


if __name__ == "__main__":
    # python -m movie_ranking.cli -v rank --challenge response.json --mode median
    # python -m movie_ranking.cli fetch --challenge response.json
    main()
