"""Configuration file loading and merging."""

import logging
from pathlib import Path

import yaml

from appseed.config.schema import DEFAULT_CONFIG, AppseedConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.appseed/config.yaml."""
    return Path.home() / ".appseed" / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.appseed/config.yaml."""
    return Path.cwd() / ".appseed" / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found, empty or invalid."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError:
        logger.warning("Ignoring malformed config file: %s", path)
        return None
    if not isinstance(data, dict):
        return None
    result: dict[str, object] = data
    return result


def load_config() -> AppseedConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.appseed/config.yaml)
    3. Local config (./.appseed/config.yaml)
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path)
        if data:
            logger.debug("Loaded config from %s", path)
            config = config.merge(AppseedConfig.from_dict(data))

    return config
