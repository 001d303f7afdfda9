"""Sitemap XML parsing utilities."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from sitemap_diff.observability import get_logger
from sitemap_diff.sitemap.errors import XMLParseError

logger = get_logger(__name__)

_INDEX_MARKER = b"<sitemapindex"


def is_sitemap_index(content: bytes) -> bool:
    """Tell an index from a plain urlset without parsing the document."""
    return _INDEX_MARKER in content


def parse_sitemap(content: bytes, *, is_index: bool) -> tuple[str, ...]:
    """Return the ``<loc>`` values of a sitemap in document order.

    For an index these are child sitemap URLs, otherwise page URLs.
    """
    try:
        root = ET.fromstring(content)  # noqa: S314
    except ET.ParseError as exc:
        msg = f"malformed sitemap XML: {exc}"
        raise XMLParseError(msg) from exc

    expected_root, child_tag = ("sitemapindex", "sitemap") if is_index else ("urlset", "url")
    tag = _strip_ns(root.tag)
    if tag != expected_root:
        msg = f"expected <{expected_root}> root element, got <{tag}>"
        raise XMLParseError(msg)

    return tuple(_find_locs(root, child_tag))


def _find_locs(root: ET.Element, child_tag: str) -> list[str]:
    locs: list[str] = []
    position = 0
    for elem in root:
        if _strip_ns(elem.tag) != child_tag:
            continue
        position += 1
        loc = next(((field.text or "").strip() for field in elem if _strip_ns(field.tag) == "loc"), "")
        if not loc:
            logger.debug("sitemap_entry_skipped", element=child_tag, position=position, reason="empty or missing <loc>")
            continue
        locs.append(loc)
    return locs


def _strip_ns(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag
