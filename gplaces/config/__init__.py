"""Configuration loading for gplaces."""

from .manager import ConfigManager, ConfigurationError, substituteEnvVars

__all__ = [
    "ConfigManager",
    "ConfigurationError",
    "substituteEnvVars",
]
