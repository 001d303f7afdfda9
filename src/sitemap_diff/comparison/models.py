from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    checked: int
    excluded: int
    missing_urls: tuple[str, ...]

    @property
    def missing(self) -> int:
        return len(self.missing_urls)
