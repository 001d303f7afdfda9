"""Shared test utilities."""

from tests.test_utils import fakes, helpers, strategies

__all__ = [
    "fakes",
    "helpers",
    "strategies",
]
