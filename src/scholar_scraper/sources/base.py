"""Search source adapter abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod

from scholar_scraper.models import QueryParameters, SearchResult, ServiceTarget


class SearchSource(ABC):
    """Abstract base class for search services.

    Each source turns QueryParameters into a request against its service
    and returns the parsed results.
    """

    @property
    @abstractmethod
    def service(self) -> ServiceTarget:
        """Service this source talks to."""
        ...

    @abstractmethod
    async def search(self, params: QueryParameters) -> list[SearchResult]:
        """Run one search and return the results of that single page."""
        ...

    async def aclose(self) -> None:
        """Release any resources held by the source."""
