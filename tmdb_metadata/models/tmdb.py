"""
Typed shapes for the TMDb payloads this library reads and the records it emits.

TMDb sends `null` for missing paths, dates and overviews; those decode to the
field default so callers never have to null-check individual fields.
"""
from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class _TmdbModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class SearchResult(_TmdbModel):
    id: int
    media_type: str = ""
    adult: bool = False
    title: str = ""
    name: str = ""
    original_title: str = ""
    original_name: str = ""
    release_date: str = ""
    first_air_date: str = ""
    poster_path: str = ""
    backdrop_path: str = ""
    profile_path: str = ""

    @property
    def display_title(self) -> str:
        return self.title or self.name


class SearchResponse(_TmdbModel):
    page: int = 0
    total_pages: int = 0
    total_results: int = 0
    results: list[SearchResult] = Field(default_factory=list)

    @property
    def top(self) -> SearchResult | None:
        return self.results[0] if self.results else None


class ImageConfig(_TmdbModel):
    base_url: str = ""
    secure_base_url: str = ""
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)


class TmdbConfig(_TmdbModel):
    """Response of `/configuration`."""

    images: ImageConfig = Field(default_factory=ImageConfig)

    @property
    def is_populated(self) -> bool:
        return bool(self.images.base_url)


class Cast(_TmdbModel):
    character: str = ""
    name: str = ""
    profile_path: str = ""


class Crew(_TmdbModel):
    department: str = ""
    name: str = ""
    job: str = ""
    profile_path: str = ""


class Credits(_TmdbModel):
    id: int = 0
    cast: list[Cast] = Field(default_factory=list)
    crew: list[Crew] = Field(default_factory=list)


class MovieMetadata(_TmdbModel):
    """
    Merged record: details + credits + the client's cached image configuration.

    TV details name the title `name` and the date `first_air_date`; both are
    accepted on input and always serialized as `title` / `release_date`.
    """

    id: int = 0
    media_type: str = ""
    backdrop_path: str = ""
    poster_path: str = ""
    credits: Credits = Field(default_factory=Credits)
    config: TmdbConfig | None = None
    imdb_id: str = ""
    overview: str = ""
    title: str = Field(default="", validation_alias=AliasChoices("title", "name"))
    release_date: str = Field(default="", validation_alias=AliasChoices("release_date", "first_air_date"))


class FilteredOutput(BaseModel):
    """Published shape handed to external consumers."""

    title: str
    artwork: str
    year: str
