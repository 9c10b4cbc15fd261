"""Configuration loading and locations."""

from treepro.config.config import Config, ConfigError
from treepro.config.paths import default_config_path

__all__ = ["Config", "ConfigError", "default_config_path"]
