"""
Default configuration values for nodefinder.

This module contains all default values used throughout the configuration system.
"""

from typing import Any

# Finder defaults
DEFAULT_SELECTOR = "css"
DEFAULT_WAIT_TIME = 2.0
DEFAULT_POLLING_INTERVAL = 0.05
DEFAULT_IGNORE_HIDDEN_ELEMENTS = False
DEFAULT_PREFER_VISIBLE_ELEMENTS = True

# File config defaults
DEFAULT_CONFIG_FILENAME = "nodefinder.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".ini", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/nodefinder",
    "/etc/nodefinder",
]

# Section name used when a config file nests finder options
CONFIG_SECTION = "finder"

# Environment variable prefix
ENV_PREFIX = "NODEFINDER_"


def get_default_finder_config() -> dict[str, Any]:
    """Get default finder configuration as a dictionary."""
    return {
        "default_selector": DEFAULT_SELECTOR,
        "default_wait_time": DEFAULT_WAIT_TIME,
        "polling_interval": DEFAULT_POLLING_INTERVAL,
        "ignore_hidden_elements": DEFAULT_IGNORE_HIDDEN_ELEMENTS,
        "prefer_visible_elements": DEFAULT_PREFER_VISIBLE_ELEMENTS,
    }
