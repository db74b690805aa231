"""Layered YAML configuration."""

from appseed.config.loader import (
    get_home_config_path,
    get_local_config_path,
    load_config,
    load_yaml_config,
)
from appseed.config.schema import DEFAULT_CONFIG, AppseedConfig

__all__ = [
    "AppseedConfig",
    "DEFAULT_CONFIG",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
    "load_yaml_config",
]
