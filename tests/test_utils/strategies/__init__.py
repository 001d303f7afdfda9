from __future__ import annotations

from tests.test_utils.strategies.url import base_url_strategy, url_lists, url_strategy
from tests.test_utils.strategies.xml import sitemap_strategy

__all__ = [
    "base_url_strategy",
    "sitemap_strategy",
    "url_lists",
    "url_strategy",
]
