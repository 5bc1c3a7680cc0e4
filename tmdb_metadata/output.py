"""
Shape a merged metadata record into the published `{title, artwork, year}` form.
"""
from __future__ import annotations

from pydantic import ValidationError

from tmdb_metadata.integrations.tmdb.errors import DecodeError
from tmdb_metadata.models.tmdb import FilteredOutput, MovieMetadata, TmdbConfig

DEFAULT_POSTER_SIZE = "w154"
ORIGINAL_SIZE = "original"


def poster_size(config: TmdbConfig, preferred: str = DEFAULT_POSTER_SIZE) -> str:
    sizes = config.images.poster_sizes
    if not sizes:
        return ORIGINAL_SIZE
    if preferred in sizes:
        return preferred
    return sizes[0]


def release_year(date: str) -> str:
    # Dates shorter than a year ("", "99") pass through untouched.
    if len(date) > 4:
        return date[:4]
    return date


def to_published(record: MovieMetadata, *, preferred_size: str = DEFAULT_POSTER_SIZE) -> FilteredOutput:
    if record.config is None:
        raise DecodeError("Merged record has no image configuration attached.")
    config = record.config
    return FilteredOutput(
        title=record.title,
        artwork=config.images.base_url + poster_size(config, preferred_size) + record.poster_path,
        year=release_year(record.release_date),
    )


def to_published_json(data: str | bytes, *, preferred_size: str = DEFAULT_POSTER_SIZE) -> str:
    """
    Decode a serialized merged record and return the serialized published output.

    Raises `DecodeError` when `data` is not JSON or not a merged-record object.
    """

    try:
        record = MovieMetadata.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Unable to decode merged metadata record: {exc}") from exc
    return to_published(record, preferred_size=preferred_size).model_dump_json()
