"""Config-related errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when the comparison settings are missing, unreadable or invalid."""
