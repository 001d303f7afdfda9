"""Test helpers."""

from tests.test_utils.helpers.fixture import (
    fixture_path,
    read_fixture,
    read_fixture_bytes,
)
from tests.test_utils.helpers.sitemap import sitemap_index_xml, urlset_xml

__all__ = [
    "fixture_path",
    "read_fixture",
    "read_fixture_bytes",
    "sitemap_index_xml",
    "urlset_xml",
]
