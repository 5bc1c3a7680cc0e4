#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys

from tmdb_metadata import TmdbClientError, init


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resolve_title",
        description="Resolve a movie or TV title on TMDb and print the published metadata JSON.",
    )
    parser.add_argument("title", help="Free-text title to search for.")
    parser.add_argument("--tv", action="store_true", help="Resolve against TV search instead of movie search.")
    parser.add_argument("--full", action="store_true", help="Print the merged record instead of the published shape.")
    parser.add_argument("--api-key", default=None, help="TMDb API key (defaults to TMDB_API_KEY).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(sys.argv[1:] if argv is None else argv))
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    client = init(args.api_key)
    try:
        record = client.tv_data(args.title) if args.tv else client.movie_data(args.title)
        print(record if args.full else client.to_json(record))
    except TmdbClientError as exc:
        print(f"ERROR: title={args.title!r} error={exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
