"""Errors raised while fetching, rewriting or resolving sitemaps."""

from __future__ import annotations


class SitemapDiffError(Exception):
    """Base class for every failure that aborts a comparison run."""


class NetworkError(SitemapDiffError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"network error fetching {url}: {reason}")


class HTTPStatusError(SitemapDiffError):
    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"status error: {status_code} for {url}")


class XMLParseError(SitemapDiffError):
    """Raised when a sitemap is malformed or has an unexpected root element."""


class URLParseError(SitemapDiffError):
    """Raised when a URL cannot be rewritten.

    ``url`` holds the original, unchanged URL.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"cannot rewrite {url!r}: {reason}")


class SitemapRecursionError(SitemapDiffError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"sitemap index recursion aborted at {url}: {reason}")
