"""Set difference between a source and a new sitemap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitemap_diff.comparison.models import ComparisonResult
from sitemap_diff.observability import get_logger

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable, Sequence

logger = get_logger(__name__)


def compare(
    source: Iterable[str],
    new_sitemap: Iterable[str],
    exclusions: Sequence[re.Pattern[str]] = (),
) -> ComparisonResult:
    """Classify every source URL as excluded, present or missing.

    An excluded URL is never counted as missing, whether or not the new
    sitemap lists it.
    """
    new_urls = set(new_sitemap)
    missing: dict[str, None] = {}
    checked = 0
    excluded = 0

    for url in source:
        checked += 1

        rule = _first_match(url, exclusions)
        if rule is not None:
            logger.info("url_excluded", url=url, exclude=rule.pattern)
            excluded += 1
            continue

        if url not in new_urls:
            missing.setdefault(url, None)

    return ComparisonResult(checked=checked, excluded=excluded, missing_urls=tuple(missing))


def _first_match(url: str, exclusions: Sequence[re.Pattern[str]]) -> re.Pattern[str] | None:
    for rule in exclusions:
        if rule.search(url):
            return rule
    return None
