from sitemap_diff.core.checker import SitemapChecker

__all__ = ["SitemapChecker"]
