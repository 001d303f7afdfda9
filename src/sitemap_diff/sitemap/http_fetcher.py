from __future__ import annotations

from http import HTTPStatus
from typing import Protocol

import httpx

from sitemap_diff.observability import get_logger
from sitemap_diff.sitemap.errors import HTTPStatusError, NetworkError

logger = get_logger(__name__)


class Fetcher(Protocol):
    async def fetch(self, url: str) -> bytes: ...


class HttpFetcher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> bytes:
        try:
            response = await self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        if response.status_code != HTTPStatus.OK:
            logger.debug("sitemap_fetch_failed", url=url, status_code=response.status_code)
            raise HTTPStatusError(url, response.status_code)

        logger.debug("sitemap_fetched", url=url, size=len(response.content))
        return response.content
