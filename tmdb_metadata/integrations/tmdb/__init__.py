"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tmdb_metadata.integrations.tmdb.client import TMDB_API_BASE_URL, TmdbGateway, build_url

__all__ = [
    "TMDB_API_BASE_URL",
    "TmdbGateway",
    "build_url",
]


def __getattr__(name: str):
    if name in __all__:
        from tmdb_metadata.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
