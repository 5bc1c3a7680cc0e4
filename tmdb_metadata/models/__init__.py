"""
Payload and record models shared across the resolver and the output transformer.
"""

from tmdb_metadata.models.tmdb import (
    Cast,
    Credits,
    Crew,
    FilteredOutput,
    ImageConfig,
    MovieMetadata,
    SearchResponse,
    SearchResult,
    TmdbConfig,
)

__all__ = [
    "Cast",
    "Credits",
    "Crew",
    "FilteredOutput",
    "ImageConfig",
    "MovieMetadata",
    "SearchResponse",
    "SearchResult",
    "TmdbConfig",
]
