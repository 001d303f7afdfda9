"""Shared pytest configuration for all test levels."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog
from hypothesis import HealthCheck, settings

from tests.test_utils.helpers import read_fixture_bytes, sitemap_index_xml, urlset_xml

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Undo configure_logging() so later tests don't write to a stale stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sitemap_urlset() -> bytes:
    return read_fixture_bytes("sitemap/urlset.xml")


@pytest.fixture
def sitemap_index() -> bytes:
    return read_fixture_bytes("sitemap/index.xml")


@pytest.fixture
def staging_documents() -> dict[str, bytes]:
    """A staging site whose index still points at the staging host."""
    return {
        "https://staging.example/sitemap-index.xml": sitemap_index_xml(["https://staging.example/sub.xml"]),
        "https://prod.example/sub.xml": urlset_xml(["https://prod.example/a", "https://prod.example/b"]),
    }


# Configure Hypothesis global settings
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=5000,
)

if os.getenv("CI"):
    settings.load_profile("ci")
else:
    settings.load_profile("dev")


_LEVEL_MARKERS = {
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = item.path.relative_to(Path(__file__).resolve().parent) if item.path else None
        if rel is None:
            continue
        for level, marker in _LEVEL_MARKERS.items():
            if rel.parts[0] == level:
                item.add_marker(marker)
                break
