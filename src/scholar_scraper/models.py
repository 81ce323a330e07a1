"""Core data models for scholar-scraper.

All Pydantic models are defined here as the single source of truth.
Every other module imports from this file.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SortMode(IntEnum):
    """Values accepted by the ``scisbd`` parameter."""

    RELEVANCE = 0
    ABSTRACTS_ONLY = 1
    DATE = 2


class ServiceTarget(str, Enum):
    SCHOLAR = "scholar"


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------

class QueryParameters(BaseModel):
    """Parameters of a single search request.

    Every optional field defaults to ``None``, meaning the parameter is left
    out of the URL entirely.
    """

    model_config = ConfigDict(frozen=True)

    # q
    query: str
    # cites - citation id, triggers "cited by"
    cite_id: str | None = None
    # as_ylo / as_yhi
    from_year: int | None = Field(default=None, ge=0)
    to_year: int | None = Field(default=None, ge=0)
    # scisbd - anything outside SortMode is dropped by the builder
    sort_mode: int | None = None
    # cluster - all versions of one work
    cluster_id: str | None = None
    # hl - interface language, e.g. "en"
    lang: str | None = None
    # lr - e.g. "lang_fr|lang_en"
    lang_limit: str | None = None
    # num / start
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    # safe=active|off
    adult_filter: bool | None = None
    # filter=1 for similar results, 0 for omitted
    similar_results: bool | None = None
    # as_vis=1 to include citations
    citations: bool | None = None

    @field_validator("lang_limit", mode="before")
    @classmethod
    def _join_languages(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return "|".join(str(v) for v in value)
        return value


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class SearchResult(BaseModel):
    title: str
    author: str
    abstract: str
    link: str
