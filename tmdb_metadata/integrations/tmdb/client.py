from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote, urlencode

import requests

from tmdb_metadata.integrations.tmdb.errors import DecodeError, RemoteStatusError, TransportError

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"

logger = logging.getLogger(__name__)


def build_url(base_url: str, path: str, params: Mapping[str, Any]) -> str:
    """
    Join the base address, an endpoint path and a query string.

    Values are percent-encoded with `quote`, so a title like "Fast & Furious"
    becomes `Fast%20%26%20Furious` rather than the form-style `+`.
    """

    query = urlencode([(k, v) for k, v in params.items() if v is not None], quote_via=quote)
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    return f"{url}?{query}" if query else url


class TmdbGateway:
    """
    Thin GET-only transport for the TMDb v3 API.

    Every call carries `api_key` as a query parameter. Non-200 responses raise
    `RemoteStatusError`; transport failures raise `TransportError`; bodies that
    are not a JSON object raise `DecodeError`. Nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = TMDB_API_BASE_URL,
        session: requests.Session | None = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = build_url(self.base_url, path, {"api_key": self.api_key, **dict(params or {})})
        headers = {"accept": "application/json"}

        logger.debug("TMDb GET %s", path)
        try:
            resp = self.session.get(url, headers=headers, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise TransportError(f"TMDb request failed: {exc}") from exc

        if resp.status_code != 200:
            logger.debug("TMDb GET %s returned HTTP %s", path, resp.status_code)
            raise RemoteStatusError(resp.status_code, body_snippet=(resp.text or "")[:400])

        try:
            payload = resp.json()
        except ValueError as exc:
            raise DecodeError(f"TMDb returned non-JSON response for {path}.") from exc

        if not isinstance(payload, dict):
            raise DecodeError(f"TMDb returned unexpected JSON shape for {path} (not an object).")
        return payload
