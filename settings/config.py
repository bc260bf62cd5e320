"""Configuration management for rat.

Loads configuration from:
1. rat.toml (project) or ~/.config/rat/config.toml (user)
2. .env file
3. Environment variables (overrides)
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import find_dotenv, load_dotenv

CONFIG_FILENAME = "rat.toml"
USER_CONFIG_PATH = Path("~/.config/rat/config.toml")
DEFAULT_ROOT = "~/.rat"


class ConfigError(Exception):
    """Raised when the configuration cannot be used."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass
class TemplatesConfig:
    """Boilerplate location and picker configuration."""

    # Directory holding one subdirectory per boilerplate
    root: str = DEFAULT_ROOT

    # Interactive filter reading names on stdin, e.g. "peco" or "fzf"
    select_cmd: str = ""

    @property
    def root_path(self) -> Path:
        """Template root with ~ and $VARS expanded."""
        return expand_path(self.root)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None  # config file the values came from

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> "Config":
        """Create Config from dictionary."""
        templates_data = data.get("templates", {})
        logging_data = data.get("logging", {})

        try:
            return cls(
                templates=TemplatesConfig(**templates_data),
                logging=LoggingConfig(**logging_data),
                source=source,
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration in {source or 'environment'}: {e}") from e

    def validate(self) -> None:
        """Check that the configuration is usable.

        Raises:
            ConfigError: If the template root is empty.
        """
        if not self.templates.root.strip():
            raise ConfigError("Please set 'RAT_ROOT' environment value")


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables in a path.

    A trailing separator is dropped, so "~/.rat/" and "~/.rat" are the same.
    """
    expanded = os.path.expandvars(os.path.expanduser(str(path)))
    return Path(expanded)


def find_config_file() -> Path | None:
    """Find rat.toml in current or parent directories, then the user config.

    Returns:
        Path to the config file or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path

    user_config = USER_CONFIG_PATH.expanduser()
    if user_config.exists():
        return user_config

    return None


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Optional explicit path to a config file

    Returns:
        Config object with merged settings.

    Raises:
        ConfigError: If the config file cannot be parsed.
    """
    # Load .env file from the working directory if present
    load_dotenv(find_dotenv(usecwd=True))

    config_data: dict[str, Any] = {}

    if config_path is None:
        config_path = find_config_file()

    source = None
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, "rb") as f:
                    config_data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Cannot read config file {path}: {e}") from e
            source = path

    # Apply environment variable overrides
    env_overrides = {
        "templates": {
            "root": os.getenv("RAT_ROOT"),
            "select_cmd": os.getenv("RAT_SELECT_CMD", os.getenv("RAT_FILTER")),
        },
        "logging": {
            "level": os.getenv("RAT_LOG_LEVEL"),
        },
    }

    # Merge env overrides (only non-None values)
    for section, values in env_overrides.items():
        if section not in config_data:
            config_data[section] = {}
        for key, value in values.items():
            if value is not None:
                config_data[section][key] = value

    return Config.from_dict(config_data, source=source)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config object (loaded once, cached).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration.

    Returns:
        Fresh Config object.
    """
    global _config
    _config = load_config()
    return _config
