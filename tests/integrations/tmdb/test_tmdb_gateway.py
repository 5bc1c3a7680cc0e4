from __future__ import annotations

import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest
import requests

from tmdb_metadata.integrations.tmdb.client import TmdbGateway, build_url
from tmdb_metadata.integrations.tmdb.errors import DecodeError, RemoteStatusError, TransportError


@dataclass
class _FakeResponse:
    status_code: int
    text: str

    def json(self):  # noqa: ANN201
        return json.loads(self.text)


def _gateway_with(response: _FakeResponse | Exception) -> tuple[TmdbGateway, MagicMock]:
    session = MagicMock()
    if isinstance(response, Exception):
        session.get.side_effect = response
    else:
        session.get.return_value = response
    return TmdbGateway("secret", base_url="http://tmdb.test/3", session=session, timeout_seconds=7.5), session


def test_build_url_percent_encodes_query_values() -> None:
    url = build_url("http://tmdb.test/3", "/search/movie", {"api_key": "k", "query": "Fast & Furious 7/8"})
    assert url == "http://tmdb.test/3/search/movie?api_key=k&query=Fast%20%26%20Furious%207%2F8"


def test_build_url_skips_none_values_and_handles_empty_query() -> None:
    assert build_url("http://tmdb.test/3/", "configuration", {"api_key": None}) == "http://tmdb.test/3/configuration"


def test_get_json_sends_api_key_timeout_and_accept_header() -> None:
    gateway, session = _gateway_with(_FakeResponse(status_code=200, text='{"ok": true}'))

    assert gateway.get_json("/search/movie", {"query": "Pulp Fiction"}) == {"ok": True}

    assert session.get.call_count == 1
    args, kwargs = session.get.call_args
    assert args[0] == "http://tmdb.test/3/search/movie?api_key=secret&query=Pulp%20Fiction"
    assert kwargs["timeout"] == 7.5
    assert kwargs["headers"]["accept"] == "application/json"


@pytest.mark.parametrize("status_code", [401, 404, 429, 500, 503])
def test_get_json_non_200_raises_status_error_with_code(status_code: int) -> None:
    gateway, _ = _gateway_with(_FakeResponse(status_code=status_code, text='{"status_message": "nope"}'))

    with pytest.raises(RemoteStatusError) as excinfo:
        gateway.get_json("/movie/680")

    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == f"Status Code {status_code} received from TMDb"
    assert excinfo.value.body_snippet == '{"status_message": "nope"}'


def test_get_json_does_not_retry() -> None:
    gateway, session = _gateway_with(_FakeResponse(status_code=503, text=""))

    with pytest.raises(RemoteStatusError):
        gateway.get_json("/configuration")

    assert session.get.call_count == 1


@pytest.mark.parametrize(
    "exc",
    [requests.ConnectionError("connection refused"), requests.Timeout("read timed out")],
)
def test_get_json_transport_failures_raise_transport_error(exc: Exception) -> None:
    gateway, _ = _gateway_with(exc)

    with pytest.raises(TransportError) as excinfo:
        gateway.get_json("/configuration")

    assert excinfo.value.__cause__ is exc


def test_get_json_malformed_body_raises_decode_error() -> None:
    gateway, _ = _gateway_with(_FakeResponse(status_code=200, text="<html>oops</html>"))

    with pytest.raises(DecodeError):
        gateway.get_json("/movie/680")


def test_get_json_non_object_body_raises_decode_error() -> None:
    gateway, _ = _gateway_with(_FakeResponse(status_code=200, text="[1, 2, 3]"))

    with pytest.raises(DecodeError):
        gateway.get_json("/movie/680")


def test_session_is_created_lazily_when_not_injected() -> None:
    gateway = TmdbGateway("secret")
    assert isinstance(gateway.session, requests.Session)
    assert gateway.session is gateway.session
