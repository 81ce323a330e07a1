"""Google Scholar search source: one GET, one results page."""

from __future__ import annotations

import logging

import httpx

from scholar_scraper.exceptions import (
    ConnectionFailedError,
    InvalidResponseError,
    ParseError,
)
from scholar_scraper.extractor import extract
from scholar_scraper.models import QueryParameters, SearchResult, ServiceTarget
from scholar_scraper.query_builder import build_url
from scholar_scraper.sources.base import SearchSource

logger = logging.getLogger(__name__)


class ScholarSource(SearchSource):
    """Google Scholar HTML scraper."""

    def __init__(
        self,
        timeout_s: float = 20.0,
        follow_redirects: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self.follow_redirects = follow_redirects
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    @property
    def service(self) -> ServiceTarget:
        return ServiceTarget.SCHOLAR

    async def _get_document(self, url: str) -> str:
        try:
            response = await self._client.get(
                url,
                timeout=self.timeout_s,
                follow_redirects=self.follow_redirects,
            )
        except httpx.RequestError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise ConnectionFailedError(url) from exc

        if response.status_code >= 400:
            raise InvalidResponseError(response.status_code, url)

        try:
            return response.text
        except (UnicodeDecodeError, LookupError) as exc:
            raise ParseError(f"Could not decode response body: {exc}") from exc

    async def search(self, params: QueryParameters) -> list[SearchResult]:
        url = build_url(params, self.service)
        document = await self._get_document(url)
        return extract(document)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
