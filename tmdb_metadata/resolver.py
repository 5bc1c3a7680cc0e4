from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from tmdb_metadata.integrations.tmdb.client import TMDB_API_BASE_URL, TmdbGateway
from tmdb_metadata.integrations.tmdb.errors import (
    DecodeError,
    NoResultsError,
    UnsupportedMediaError,
    WrongEndpointError,
)
from tmdb_metadata.models.tmdb import Credits, MovieMetadata, SearchResponse, SearchResult, TmdbConfig
from tmdb_metadata.output import to_published_json
from tmdb_metadata.utils.env import require_api_key, resolve_base_url

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

MEDIA_MOVIE = "movie"
MEDIA_TV = "tv"
MEDIA_PERSON = "person"


def _decode(model: type[_ModelT], payload: Mapping[str, Any], *, what: str) -> _ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Unable to decode TMDb {what}: {exc}") from exc


class TmdbMetadataClient:
    """
    Resolve a free-text title into a merged TMDb metadata record.

    The image configuration is fetched on first use and cached on the instance
    for its whole lifetime; create a new client to pick up remote changes.
    """

    def __init__(self, gateway: TmdbGateway) -> None:
        self.gateway = gateway
        self._config: TmdbConfig | None = None
        self._config_lock = threading.Lock()

    @property
    def config(self) -> TmdbConfig | None:
        return self._config

    # --- config cache ---

    def get_config(self) -> TmdbConfig:
        with self._config_lock:
            if self._config is not None and self._config.is_populated:
                return self._config
            logger.debug("Fetching TMDb image configuration.")
            self._config = _decode(TmdbConfig, self.gateway.get_json("/configuration"), what="configuration")
            return self._config

    # --- search ---

    def _search(self, path: str, title: str) -> SearchResponse:
        return _decode(SearchResponse, self.gateway.get_json(path, {"query": title}), what="search response")

    def search_multi(self, title: str) -> SearchResponse:
        return self._search("/search/multi", title)

    def search_movie(self, title: str) -> SearchResponse:
        return self._search("/search/movie", title)

    def search_tv(self, title: str) -> SearchResponse:
        return self._search("/search/tv", title)

    # --- details / credits ---

    def movie_details(self, media_id: int) -> MovieMetadata:
        return _decode(MovieMetadata, self.gateway.get_json(f"/movie/{int(media_id)}"), what="movie details")

    def movie_credits(self, media_id: int) -> Credits:
        return _decode(Credits, self.gateway.get_json(f"/movie/{int(media_id)}/credits"), what="movie credits")

    def tv_details(self, media_id: int) -> MovieMetadata:
        return _decode(MovieMetadata, self.gateway.get_json(f"/tv/{int(media_id)}"), what="tv details")

    def tv_credits(self, media_id: int) -> Credits:
        return _decode(Credits, self.gateway.get_json(f"/tv/{int(media_id)}/credits"), what="tv credits")

    # --- assembly ---

    def _merge(self, record: MovieMetadata, credits: Credits, media_id: int, media_type: str) -> MovieMetadata:
        record.credits = credits
        # Attach the cached instance itself; the output step reads its live size lists.
        record.config = self.get_config()
        record.id = int(media_id)
        record.media_type = media_type
        return record

    def assemble_movie(self, media_id: int) -> MovieMetadata:
        details = self.movie_details(media_id)
        credits = self.movie_credits(media_id)
        return self._merge(details, credits, media_id, MEDIA_MOVIE)

    def assemble_tv(self, media_id: int) -> MovieMetadata:
        details = self.tv_details(media_id)
        credits = self.tv_credits(media_id)
        return self._merge(details, credits, media_id, MEDIA_TV)

    # --- disambiguation ---

    @staticmethod
    def _top_result(title: str, response: SearchResponse) -> SearchResult:
        top = response.top
        if response.total_results == 0 or top is None:
            raise NoResultsError(title)
        if top.media_type == MEDIA_PERSON:
            raise UnsupportedMediaError(MEDIA_PERSON)
        return top

    def resolve_movie(self, title: str) -> MovieMetadata:
        top = self._top_result(title, self.search_movie(title))
        if top.media_type == MEDIA_TV:
            raise WrongEndpointError(MEDIA_TV, expected=MEDIA_MOVIE)
        logger.debug("Resolved %r to TMDb movie id=%s", title, top.id)
        return self.assemble_movie(top.id)

    def resolve_tv(self, title: str) -> MovieMetadata:
        top = self._top_result(title, self.search_tv(title))
        if top.media_type == MEDIA_MOVIE:
            raise WrongEndpointError(MEDIA_MOVIE, expected=MEDIA_TV)
        logger.debug("Resolved %r to TMDb tv id=%s", title, top.id)
        return self.assemble_tv(top.id)

    # --- serialized surface ---

    def movie_data(self, title: str) -> str:
        return self.resolve_movie(title).model_dump_json()

    def tv_data(self, title: str) -> str:
        return self.resolve_tv(title).model_dump_json()

    def to_json(self, data: str | bytes) -> str:
        return to_published_json(data)


def init(
    api_key: str | None = None,
    *,
    base_url: str | None = None,
    session: requests.Session | None = None,
    timeout_seconds: float = 20.0,
) -> TmdbMetadataClient:
    """
    Build a client for `api_key` (falls back to `TMDB_API_KEY` from the environment or `.env`).
    """

    gateway = TmdbGateway(
        require_api_key(api_key),
        base_url=base_url or resolve_base_url(TMDB_API_BASE_URL),
        session=session,
        timeout_seconds=timeout_seconds,
    )
    return TmdbMetadataClient(gateway)
