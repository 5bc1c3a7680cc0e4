"""
Resolve free-text movie and TV titles into normalized TMDb metadata.

Typical use:

    client = tmdb_metadata.init(api_key)
    record = client.movie_data("Pulp Fiction")   # serialized merged record
    client.to_json(record)                       # {"title": ..., "artwork": ..., "year": ...}

The transport lives in `tmdb_metadata.integrations.tmdb`; payload models in
`tmdb_metadata.models`; output shaping in `tmdb_metadata.output`.
"""

from tmdb_metadata.integrations.tmdb.errors import (
    DecodeError,
    NoResultsError,
    RemoteStatusError,
    TmdbClientError,
    TransportError,
    UnsupportedMediaError,
    WrongEndpointError,
)
from tmdb_metadata.resolver import TmdbMetadataClient, init

__all__ = [
    "DecodeError",
    "NoResultsError",
    "RemoteStatusError",
    "TmdbClientError",
    "TmdbMetadataClient",
    "TransportError",
    "UnsupportedMediaError",
    "WrongEndpointError",
    "init",
]
