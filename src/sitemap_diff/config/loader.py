from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import CompareConfig

if TYPE_CHECKING:
    from pathlib import Path


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"config not found: {path}"
        raise ConfigError(msg) from exc
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc
    return data


def _validate(data: dict[str, Any]) -> CompareConfig:
    try:
        return CompareConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"invalid config: {exc.error_count()} validation error(s)"
        raise ConfigError(msg) from exc


def load_config(path: Path) -> CompareConfig:
    return _validate(_read_toml(path))


def build_config(path: Path | None = None, **overrides: Any) -> CompareConfig:
    """Merge explicit overrides on top of the optional TOML file.

    Overrides that are ``None`` count as not given.
    """
    data = _read_toml(path) if path is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return _validate(data)
