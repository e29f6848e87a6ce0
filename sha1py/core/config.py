"""Configuration management for sha1py.

This module provides a clean interface for reading and writing
both project-local and global configuration files.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from sha1py.core.logs import get_logger

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = '.sha1pyconfig'

# Values used when no config file or environment variable sets a key
DEFAULTS = {
    'core': {
        'chunksize': '65536',
    },
    'bench': {
        'iterations': '1000',
        'size': '1048576',
    },
}


class Config:
    """
    Manages sha1py configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.sha1pyconfig
    - Project config: ./.sha1pyconfig

    Project config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / PROJECT_CONFIG_NAME

    def __init__(self, project_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            project_config_path: Path to project config file, if any
        """
        self.project_config_path = project_config_path
        self._global_config = None
        self._project_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = self._load(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def project_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return project configuration."""
        if self._project_config is None and self.project_config_path:
            self._project_config = self._load(self.project_config_path)
        return self._project_config

    @staticmethod
    def _load(path: Path) -> configparser.ConfigParser:
        config = configparser.ConfigParser()
        if path.exists():
            config.read(path)
            logger.debug("config_loaded", path=str(path))
        return config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (SHA1PY_<SECTION>_<KEY>)
        2. Project config
        3. Global config
        4. Fallback value
        5. Built-in default

        Args:
            section: Config section (e.g., 'core', 'bench')
            key: Config key (e.g., 'chunksize')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"SHA1PY_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.project_config and self.project_config.has_option(section, key):
            return self.project_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        if fallback is not None:
            return fallback
        return DEFAULTS.get(section, {}).get(key)

    def get_int(self, section: str, key: str, fallback: Optional[int] = None) -> int:
        """
        Get a positive integer configuration value.

        Raises:
            ValueError: If the value is missing or not a positive integer
        """
        raw = self.get(section, key, None if fallback is None else str(fallback))
        if raw is None:
            raise ValueError(f"Config key not set: {section}.{key}")
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"Config {section}.{key} must be an integer, got {raw!r}") from None
        if value <= 0:
            raise ValueError(f"Config {section}.{key} must be positive, got {value}")
        return value

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise project config
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.project_config_path:
                raise ValueError("No project config path available")
            config = self.project_config
            config_path = self.project_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.project_config:
                return False
            config = self.project_config
            config_path = self.project_config_path

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        # Remove empty sections
        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self, global_only: bool = False, project_only: bool = False) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Args:
            global_only: Only show global config
            project_only: Only show project config

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}

        if not project_only:
            for section in self.global_config.sections():
                if section not in result:
                    result[section] = {}
                for key, value in self.global_config.items(section):
                    result[section][f"{key} (global)"] = value

        if not global_only and self.project_config:
            for section in self.project_config.sections():
                if section not in result:
                    result[section] = {}
                for key, value in self.project_config.items(section):
                    result[section][key] = value

        return result


def get_config(directory: Optional[Path] = None) -> Config:
    """
    Get a Config instance.

    Args:
        directory: Directory holding the project config, defaults to cwd

    Returns:
        Config instance
    """
    directory = Path(directory) if directory else Path.cwd()
    return Config(directory / PROJECT_CONFIG_NAME)
