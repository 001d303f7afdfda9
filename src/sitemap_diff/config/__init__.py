from .errors import ConfigError
from .loader import build_config, load_config
from .models import CompareConfig

__all__ = [
    "CompareConfig",
    "ConfigError",
    "build_config",
    "load_config",
]
