"""
Configuration module for nodefinder.

This module provides:
- An immutable FinderConfig snapshot validated by Pydantic
- Configuration file loading (JSON, YAML, INI, TOML)
- Environment variable support
- Built-in profiles (fast, patient, strict)
- The process-wide default configuration

Example usage:
    from nodefinder.config import FinderConfig, configure, load_config

    # Load from file with environment overrides
    config = load_config("nodefinder.config.json")

    # Create programmatically
    config = FinderConfig(default_wait_time=5.0, ignore_hidden_elements=True)

    # Change the process-wide defaults
    configure(prefer_visible_elements=False)

Environment variables:
    NODEFINDER_DEFAULT_SELECTOR=xpath
    NODEFINDER_DEFAULT_WAIT_TIME=5
    NODEFINDER_POLLING_INTERVAL=0.1
    NODEFINDER_IGNORE_HIDDEN_ELEMENTS=true
    NODEFINDER_PREFER_VISIBLE_ELEMENTS=false
"""

from .defaults import (
    DEFAULT_IGNORE_HIDDEN_ELEMENTS,
    DEFAULT_POLLING_INTERVAL,
    DEFAULT_PREFER_VISIBLE_ELEMENTS,
    DEFAULT_SELECTOR,
    DEFAULT_WAIT_TIME,
    ENV_PREFIX,
    get_default_finder_config,
)
from .env import (
    ENV_MAPPINGS,
    get_env,
    get_env_bool,
    get_env_float,
    get_env_key,
    get_env_str,
    load_env_config,
)
from .loader import (
    PROFILES,
    ConfigLoader,
    ConfigurationError,
    find_config_file,
    load_config,
    load_config_with_profile,
    load_file,
    load_profile,
    merge_configs,
    save_config,
)
from .options import FinderConfig
from .runtime import (
    configure,
    get_default_config,
    reset_default_config,
    set_default_config,
)

__all__ = [
    "FinderConfig",
    # Process-wide defaults
    "get_default_config",
    "set_default_config",
    "configure",
    "reset_default_config",
    # Loader functions
    "load_config",
    "load_config_with_profile",
    "load_file",
    "load_profile",
    "save_config",
    "find_config_file",
    "merge_configs",
    "ConfigLoader",
    "ConfigurationError",
    "PROFILES",
    # Environment functions
    "get_env",
    "get_env_bool",
    "get_env_float",
    "get_env_str",
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "DEFAULT_SELECTOR",
    "DEFAULT_WAIT_TIME",
    "DEFAULT_POLLING_INTERVAL",
    "DEFAULT_IGNORE_HIDDEN_ELEMENTS",
    "DEFAULT_PREFER_VISIBLE_ELEMENTS",
    "get_default_finder_config",
]
