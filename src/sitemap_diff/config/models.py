from __future__ import annotations

import re
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitemap_diff.sitemap.resolver import DEFAULT_MAX_DEPTH

DEFAULT_SOURCE_URL = "https://example.com/sitemap.xml"
DEFAULT_NEW_URL = "https://example-new.com/sitemap.xml"
DEFAULT_TIMEOUT_SECONDS = 10.0


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


class CompareConfig(BaseModel):
    """Settings for one source/new sitemap comparison."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_url: str = DEFAULT_SOURCE_URL
    new_url: str = DEFAULT_NEW_URL
    new_base_url: str = ""
    exclude: tuple[str, ...] = ()
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    @field_validator("source_url", "new_url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        if not _is_valid_url(value):
            msg = "must be a valid URL"
            raise ValueError(msg)
        return value

    @field_validator("new_base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        if value and not _is_valid_url(value):
            msg = "must be empty or a valid URL"
            raise ValueError(msg)
        return value

    @field_validator("exclude")
    @classmethod
    def _validate_exclude(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as exc:
                msg = f"invalid regular expression {pattern!r}: {exc}"
                raise ValueError(msg) from exc
        return value

    @property
    def exclusion_rules(self) -> tuple[re.Pattern[str], ...]:
        return tuple(re.compile(pattern) for pattern in self.exclude)
