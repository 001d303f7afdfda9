"""Scheme and host rewriting for sub-sitemap URLs."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

from sitemap_diff.sitemap.errors import URLParseError

if TYPE_CHECKING:
    from urllib.parse import SplitResult


def rewrite_url(original: str, replacement_base: str) -> str:
    """Replace scheme and host of ``original`` with those of ``replacement_base``.

    Path, query, fragment and user-info of ``original`` are kept as they are.
    An empty ``replacement_base`` returns ``original`` untouched.
    """
    if not replacement_base:
        return original

    parsed = _split(original, original)
    base = _split(replacement_base, original)
    if not base.scheme or not base.hostname:
        msg = f"replacement base {replacement_base!r} has no scheme or host"
        raise URLParseError(original, msg)

    netloc = _host_port(base)
    userinfo, sep, _ = parsed.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"

    return urlunsplit((base.scheme, netloc, parsed.path, parsed.query, parsed.fragment))


def _split(value: str, original: str) -> SplitResult:
    try:
        parsed = urlsplit(value)
        # Port validation only happens on access.
        _ = parsed.port
    except ValueError as exc:
        raise URLParseError(original, str(exc)) from exc
    return parsed


def _host_port(parsed: SplitResult) -> str:
    return parsed.netloc.rpartition("@")[2]
