from sitemap_diff.sitemap.errors import (
    HTTPStatusError,
    NetworkError,
    SitemapDiffError,
    SitemapRecursionError,
    URLParseError,
    XMLParseError,
)
from sitemap_diff.sitemap.http_fetcher import Fetcher, HttpFetcher
from sitemap_diff.sitemap.parser import is_sitemap_index, parse_sitemap
from sitemap_diff.sitemap.resolver import SitemapResolver
from sitemap_diff.sitemap.url_rewriter import rewrite_url

__all__ = [
    "Fetcher",
    "HTTPStatusError",
    "HttpFetcher",
    "NetworkError",
    "SitemapDiffError",
    "SitemapRecursionError",
    "SitemapResolver",
    "URLParseError",
    "XMLParseError",
    "is_sitemap_index",
    "parse_sitemap",
    "rewrite_url",
]
