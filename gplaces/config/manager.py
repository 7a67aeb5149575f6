"""
Configuration management for gplaces.

Loads TOML configuration (main file plus optional config directories),
substitutes ``${ENV_VAR}`` placeholders and exposes typed getters for the
sections used by the library. Example::

    [places]
    api-key = "${GOOGLE_API_KEY}"
    base-url = "https://maps.googleapis.com/maps/api/place"
    timeout = 10
    language = "da"
    region = "dk"
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

from gplaces import utils

logger = logging.getLogger(__name__)

ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}")


class ConfigurationError(Exception):
    """Raised when configuration can't be loaded or a required value is missing."""


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with actual value.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ``${VAR_NAME}`` placeholders in configuration values.

    Strings get placeholders replaced, dicts and lists are processed
    recursively, anything else is returned unchanged.
    """
    if isinstance(value, str):
        return ENV_PLACEHOLDER_RE.sub(replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading for gplaces, dood!"""

    def __init__(
        self,
        configPath: str = "config.toml",
        configDirs: Optional[List[str]] = None,
        dotEnvFile: Optional[str] = ".env",
    ):
        """Initialize ConfigManager with config file path and optional config directories.

        Args:
            configPath: Main TOML config file
            configDirs: Directories to scan recursively for extra ``*.toml`` files,
                merged over the main config in sorted order
            dotEnvFile: Optional ``.env`` file loaded into environment before substitution

        Raises:
            ConfigurationError: If no config source exists or a file can't be parsed
        """
        self.configPath = configPath
        self.configDirs = configDirs or []
        if dotEnvFile:
            utils.load_dotenv(path=dotEnvFile)
        self.config: Dict[str, Any] = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory, dood!"""
        dirPath = Path(directory)

        if not dirPath.is_dir():
            logger.warning(f"Config directory {directory} does not exist or is not a directory, skipping")
            return []

        tomlFiles = [f for f in dirPath.rglob("*.toml") if f.is_file()]
        # Sort for consistent merge order
        return sorted(tomlFiles)

    def _mergeConfigs(self, baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries, dood!"""
        merged = baseConfig.copy()

        for key, value in newConfig.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadTomlFile(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                return tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigurationError(f"Failed to parse config file {path}: {e}") from e

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file and optional config directories."""
        configFile = Path(self.configPath)
        hasConfigFile = configFile.is_file()
        if not hasConfigFile and not self.configDirs:
            raise ConfigurationError(f"Configuration file {self.configPath} not found")

        config: Dict[str, Any] = {}
        if hasConfigFile:
            config = self._loadTomlFile(configFile)
            logger.info(f"Loaded main config from {self.configPath}")

        for configDir in self.configDirs:
            tomlFiles = self._findTomlFilesRecursive(configDir)
            logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")
            for tomlFile in tomlFiles:
                config = self._mergeConfigs(config, self._loadTomlFile(tomlFile))
                logger.debug(f"Merged config from {tomlFile}")

        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getPlacesConfig(self) -> Dict[str, Any]:
        """Get Places API client configuration (api-key, base-url, timeout, language)."""
        return self.get("places", {})

    def getApiKey(self) -> str:
        """Get Places API key.

        Raises:
            ConfigurationError: If key is missing or still an unresolved placeholder
        """
        apiKey = str(self.getPlacesConfig().get("api-key", "")).strip()
        if not apiKey or ENV_PLACEHOLDER_RE.fullmatch(apiKey):
            raise ConfigurationError("Places API key is not configured, set [places] api-key")
        return apiKey
