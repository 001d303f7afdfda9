"""structlog setup for the comparison run.

Log lines go to stderr; stdout is reserved for the report.
"""

from __future__ import annotations

import os
import re
import sys
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping

_MASK = "***"
_MAX_VALUE_LENGTH = 4000
_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})

_SECRET_KEY_PATTERN = re.compile(r"(token|api_key|apikey|authorization|cookie|secret|password)", re.IGNORECASE)
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
_NAMED_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}

# Sitemap URLs may carry basic-auth credentials or signed query parameters.
_URL_SCRUBBERS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(token|api_key|apikey|access_token|key|sig)=([^&#\s]+)"), rf"\1={_MASK}"),
    (re.compile(r"(https?://)[^/@\s]+@"), rf"\1{_MASK}@"),
)


def _escape(match: re.Match[str]) -> str:
    char = match.group(0)
    return _NAMED_ESCAPES.get(char, f"\\x{ord(char):02x}")


def _scrub_text(text: str) -> str:
    text = _CONTROL_CHARS_PATTERN.sub(_escape, text)
    for pattern, replacement in _URL_SCRUBBERS:
        text = pattern.sub(replacement, text)
    if len(text) > _MAX_VALUE_LENGTH:
        return text[:_MAX_VALUE_LENGTH] + "..."
    return text


def sanitize_value(value: object) -> object:
    if isinstance(value, str):
        return _scrub_text(value)
    if isinstance(value, (int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {key: sanitize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [sanitize_value(val) for val in value]
    return str(value)


def sanitize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    return {key: _MASK if _SECRET_KEY_PATTERN.search(key) else sanitize_value(value) for key, value in event_dict.items()}


def parse_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    return level if level in _LEVELS else "INFO"


def _renderer() -> structlog.types.Processor:
    if os.environ.get("LOG_FORMAT", "json").lower() == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(ensure_ascii=False)


def configure_logging() -> structlog.BoundLogger:
    structlog.configure(
        processors=[
            sanitize_event,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            _renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_level()),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )
    return cast("structlog.BoundLogger", structlog.get_logger())


def get_logger(name: str) -> structlog.BoundLogger:
    return cast("structlog.BoundLogger", structlog.get_logger(name))
