from __future__ import annotations


class TmdbClientError(RuntimeError):
    """Base class for every failure raised while talking to TMDb."""


class TransportError(TmdbClientError):
    """The request never produced a response (connection refused, DNS, timeout)."""


class RemoteStatusError(TmdbClientError):
    def __init__(self, status_code: int, *, body_snippet: str | None = None) -> None:
        super().__init__(f"Status Code {status_code} received from TMDb")
        self.status_code = status_code
        self.body_snippet = body_snippet


class DecodeError(TmdbClientError):
    """A body could not be parsed into the expected shape."""


class NoResultsError(TmdbClientError):
    def __init__(self, title: str) -> None:
        super().__init__(f"No results found at TMDb for {title!r}")
        self.title = title


class UnsupportedMediaError(TmdbClientError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Metadata for {kind} results is not supported")
        self.kind = kind


class WrongEndpointError(TmdbClientError):
    def __init__(self, kind: str, *, expected: str) -> None:
        super().__init__(f"Top TMDb result is a {kind}; not supported inside a call for {expected} data")
        self.kind = kind
        self.expected = expected
