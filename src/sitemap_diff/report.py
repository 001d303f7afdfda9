from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemap_diff.comparison import ComparisonResult
    from sitemap_diff.config import CompareConfig


def render_report(config: CompareConfig, result: ComparisonResult) -> str:
    lines = [
        "",
        "Result",
        "=============",
        f"Source Sitemap: {config.source_url}",
        f"URLs checked (from source sitemap): {result.checked}",
        f"New Sitemap: {config.new_url}",
        f"Excludes configured: {len(config.exclude)}",
        "",
        f"URLs skipped because they matched an exclude: {result.excluded}",
        f"URLs missing from source sitemap in new sitemap: {result.missing}",
        "",
    ]
    if result.missing_urls:
        lines.append("Missing URLs in the new sitemap:")
        lines.extend(result.missing_urls)
    return "\n".join(lines)
