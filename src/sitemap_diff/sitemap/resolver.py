from __future__ import annotations

from typing import TYPE_CHECKING

from sitemap_diff.observability import get_logger
from sitemap_diff.sitemap.errors import SitemapRecursionError
from sitemap_diff.sitemap.parser import is_sitemap_index, parse_sitemap
from sitemap_diff.sitemap.url_rewriter import rewrite_url

if TYPE_CHECKING:
    from sitemap_diff.sitemap.http_fetcher import Fetcher

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 10


class SitemapResolver:
    """Flatten sitemaps and (nested) sitemap indexes into one list of page URLs."""

    def __init__(self, fetcher: Fetcher, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._fetcher = fetcher
        self._max_depth = max_depth

    async def resolve_url(self, url: str, replacement_base: str = "") -> tuple[str, ...]:
        """Fetch the sitemap at ``url`` and resolve it.

        ``url`` itself is never rewritten, only the sub-sitemaps it references.
        """
        content = await self._fetcher.fetch(url)
        return await self._resolve(content, replacement_base, chain=(url,))

    async def resolve(self, content: bytes, replacement_base: str = "") -> tuple[str, ...]:
        return await self._resolve(content, replacement_base, chain=())

    async def _resolve(self, content: bytes, replacement_base: str, *, chain: tuple[str, ...]) -> tuple[str, ...]:
        if not is_sitemap_index(content):
            return parse_sitemap(content, is_index=False)

        children = parse_sitemap(content, is_index=True)
        logger.debug("sitemap_index_parsed", sitemaps=len(children), depth=len(chain))

        merged: list[str] = []
        for child in children:
            target = rewrite_url(child, replacement_base)
            if target in chain:
                raise SitemapRecursionError(target, "sitemap index references itself")
            if len(chain) >= self._max_depth:
                raise SitemapRecursionError(target, f"nesting deeper than {self._max_depth} levels")

            child_content = await self._fetcher.fetch(target)
            merged.extend(await self._resolve(child_content, replacement_base, chain=(*chain, target)))

        return tuple(merged)
