"""Configuration and logging for rat."""

from settings.config import (
    Config,
    ConfigError,
    LoggingConfig,
    TemplatesConfig,
    expand_path,
    find_config_file,
    get_config,
    load_config,
    reload_config,
)
from settings.logging_setup import setup_logging

__all__ = [
    "Config",
    "ConfigError",
    "LoggingConfig",
    "TemplatesConfig",
    "expand_path",
    "find_config_file",
    "get_config",
    "load_config",
    "reload_config",
    "setup_logging",
]
