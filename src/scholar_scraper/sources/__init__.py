"""Search service adapters."""

from scholar_scraper.sources.base import SearchSource
from scholar_scraper.sources.factory import create_source

__all__ = ["SearchSource", "create_source"]
