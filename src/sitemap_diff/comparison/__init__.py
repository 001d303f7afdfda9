from sitemap_diff.comparison.comparator import compare
from sitemap_diff.comparison.models import ComparisonResult

__all__ = ["ComparisonResult", "compare"]
