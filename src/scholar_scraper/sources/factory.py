"""Search source factory."""

from __future__ import annotations

import httpx

from scholar_scraper.config import ScholarConfig
from scholar_scraper.exceptions import InvalidServiceError
from scholar_scraper.models import ServiceTarget
from scholar_scraper.sources.base import SearchSource


def create_source(
    config: ScholarConfig,
    client: httpx.AsyncClient | None = None,
) -> SearchSource:
    """Create a search source adapter from configuration."""
    match config.service:
        case ServiceTarget.SCHOLAR:
            from scholar_scraper.sources.scholar import ScholarSource

            return ScholarSource(
                timeout_s=config.timeout_s,
                follow_redirects=config.follow_redirects,
                client=client,
            )
        case _:
            raise InvalidServiceError(f"Unknown search service: {config.service}")
