"""
Environment variable support for nodefinder configuration.

This module provides functions to load configuration values from environment
variables with support for type conversion.
"""

import os
from typing import Any, Optional, TypeVar, Union, get_args, get_origin

from .defaults import ENV_PREFIX

T = TypeVar("T")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "default_wait_time")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "NODEFINDER_DEFAULT_WAIT_TIME")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def parse_value(value: str, target_type: type) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type

    Returns:
        Parsed value
    """
    origin = get_origin(target_type)

    if origin is Union:
        # Handle Optional types
        args = get_args(target_type)
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    if target_type == float:
        return float(value)

    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[type] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, str]]:
    """Get configuration value from environment variable.

    Args:
        key: Configuration key (e.g., "default_wait_time")
        default: Default value if not set
        target_type: Target type for parsing
        prefix: Environment variable prefix

    Returns:
        Parsed value or default
    """
    env_key = get_env_key(key, prefix)
    value = os.environ.get(env_key)

    if value is None:
        return default

    if target_type is not None:
        return parse_value(value, target_type)

    # Infer type from default
    if default is not None:
        return parse_value(value, type(default))

    return value


def get_env_bool(key: str, default: bool = False, prefix: str = ENV_PREFIX) -> bool:
    """Get boolean value from environment variable."""
    result = get_env(key, default, bool, prefix)
    return result if isinstance(result, bool) else default


def get_env_float(key: str, default: float = 0.0, prefix: str = ENV_PREFIX) -> float:
    """Get float value from environment variable."""
    result = get_env(key, default, float, prefix)
    return result if isinstance(result, (int, float)) else default


def get_env_str(
    key: str, default: Optional[str] = None, prefix: str = ENV_PREFIX
) -> Optional[str]:
    """Get string value from environment variable."""
    env_key = get_env_key(key, prefix)
    return os.environ.get(env_key, default)


# Predefined environment variable mappings
ENV_MAPPINGS = {
    "default_selector": ("NODEFINDER_DEFAULT_SELECTOR", str),
    "default_wait_time": ("NODEFINDER_DEFAULT_WAIT_TIME", float),
    "polling_interval": ("NODEFINDER_POLLING_INTERVAL", float),
    "ignore_hidden_elements": ("NODEFINDER_IGNORE_HIDDEN_ELEMENTS", bool),
    "prefer_visible_elements": ("NODEFINDER_PREFER_VISIBLE_ELEMENTS", bool),
}


def load_env_config() -> dict[str, Any]:
    """Load configuration from predefined environment variables.

    Only variables that are actually set end up in the result, so the
    returned dictionary can be merged over file or default values.

    Returns:
        Dictionary of configuration values

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    result: dict[str, Any] = {}

    for config_key, (env_var, target_type) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is not None:
            result[config_key] = parse_value(value, target_type)

    return result
