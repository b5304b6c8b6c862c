"""
Configuration loading.

Settings come from a JSON file merged over DEFAULT_CONFIG, so a file only
needs the keys it changes.
"""
import copy
import json
import logging
import os

from DocSeeker.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"

DEFAULT_CONFIG = {
    "index_file": "index.json",
    "search": {
        "top_k": 10,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 6969,
    },
    "logging": {
        "level": "INFO",
    },
}


def merge_config(base, override):
    """
    Recursively merge override into a copy of base.

    Args:
        base: Default configuration dictionary
        override: Values to apply on top of base

    Returns:
        New merged dictionary
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None):
    """
    Load configuration from file.

    An explicitly given file must exist and be valid JSON. Without one,
    config.json in the working directory is used when present; problems
    with it only produce a warning.

    Args:
        config_path: Optional path to a JSON configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If an explicitly given file cannot be used
    """
    explicit = config_path is not None
    if not explicit:
        config_path = os.path.join(os.getcwd(), CONFIG_FILENAME)
        if not os.path.exists(config_path):
            return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("top level must be an object")
    except (OSError, ValueError) as e:
        if explicit:
            raise ConfigError(f"could not load config {config_path}: {e}") from e
        logger.warning("Could not load config %s: %s, using default settings", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.debug("Loaded configuration from %s", config_path)
    return merge_config(DEFAULT_CONFIG, data)
