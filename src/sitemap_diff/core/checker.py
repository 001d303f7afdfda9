from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from sitemap_diff.comparison import ComparisonResult, compare
from sitemap_diff.observability import get_logger

if TYPE_CHECKING:
    from sitemap_diff.config import CompareConfig

logger = get_logger(__name__)


class Resolver(Protocol):
    async def resolve_url(self, url: str, replacement_base: str = "") -> tuple[str, ...]: ...


class SitemapChecker:
    def __init__(self, *, resolver: Resolver) -> None:
        self._resolver = resolver

    async def run(self, config: CompareConfig) -> ComparisonResult:
        logger.info("comparison_started", source=config.source_url, new=config.new_url, excludes=len(config.exclude))

        source = await self._resolver.resolve_url(config.source_url)
        logger.info("sitemap_resolved", url=config.source_url, urls=len(source))

        new_sitemap = await self._resolver.resolve_url(config.new_url, config.new_base_url)
        logger.info("sitemap_resolved", url=config.new_url, urls=len(new_sitemap), new_base_url=config.new_base_url or None)

        result = compare(source, new_sitemap, config.exclusion_rules)
        logger.info(
            "comparison_completed",
            checked=result.checked,
            excluded=result.excluded,
            missing=result.missing,
        )
        return result
