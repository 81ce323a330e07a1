"""scholar-scraper: Google Scholar query building and result scraping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scholar_scraper.exceptions import (
    ConnectionFailedError,
    InvalidResponseError,
    InvalidServiceError,
    MalformedURLError,
    MissingRequiredFieldError,
    NotImplementedFeatureError,
    ParseError,
    ScholarError,
)
from scholar_scraper.export import export_json, export_markdown
from scholar_scraper.extractor import extract
from scholar_scraper.models import (
    QueryParameters,
    SearchResult,
    ServiceTarget,
    SortMode,
)
from scholar_scraper.query_builder import build_url

if TYPE_CHECKING:
    from scholar_scraper.config import ScholarConfig


async def search(
    params: QueryParameters | str,
    config: ScholarConfig | None = None,
) -> list[SearchResult]:
    """One-line convenience: fetch and parse a single Scholar results page.

    Args:
        params: Full QueryParameters, or a bare query string.
        config: Optional ScholarConfig. If None, loads from environment.
    """
    from scholar_scraper.config import load_config
    from scholar_scraper.sources.factory import create_source

    if isinstance(params, str):
        params = QueryParameters(query=params)

    cfg = config or load_config()
    source = create_source(cfg)
    try:
        return await source.search(params)
    finally:
        await source.aclose()


__all__ = [
    "QueryParameters",
    "SearchResult",
    "ServiceTarget",
    "SortMode",
    "build_url",
    "extract",
    "search",
    "export_json",
    "export_markdown",
    "ScholarError",
    "ConnectionFailedError",
    "ParseError",
    "InvalidServiceError",
    "MissingRequiredFieldError",
    "NotImplementedFeatureError",
    "MalformedURLError",
    "InvalidResponseError",
]
