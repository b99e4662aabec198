"""Configuration models and loaders for sha256tool."""

from .loader import ConfigError, load_config
from .models import LoggingConfig, RuntimeConfig, Sha256ToolConfig

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "RuntimeConfig",
    "Sha256ToolConfig",
    "load_config",
]
