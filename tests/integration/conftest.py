from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from sitemap_diff.sitemap import HttpFetcher, SitemapResolver

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from pytest_httpserver import HTTPServer


@pytest.fixture
async def fetcher(httpserver: HTTPServer) -> AsyncIterator[HttpFetcher]:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield HttpFetcher(client)


@pytest.fixture
def resolver(fetcher: HttpFetcher) -> SitemapResolver:
    return SitemapResolver(fetcher)
