"""
Configuration file loader for nodefinder.

This module provides functions to load configuration from various file formats
including JSON, YAML, INI, and TOML.
"""

import json
import tomllib
from configparser import ConfigParser
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .defaults import (
    CONFIG_SECTION,
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import FinderConfig


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _load_ini(path: Path) -> dict[str, Any]:
    """Load configuration from INI file.

    Args:
        path: Path to INI file

    Returns:
        Configuration dictionary
    """
    parser = ConfigParser()
    parser.read(path, encoding="utf-8")

    result: dict[str, Any] = {}

    for section in parser.sections():
        result[section] = {}
        for key, value in parser.items(section):
            result[section][key] = _convert_ini_value(value)

    return result


def _convert_ini_value(value: str) -> Any:
    """Convert INI string value to appropriate type."""
    value = value.strip()

    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    try:
        return float(value)
    except ValueError:
        pass

    return value


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    Values may live at the top level or under a ``finder`` section.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, unreadable or of an
            unsupported format
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = _load_json(path)
        elif suffix in (".yaml", ".yml"):
            data = _load_yaml(path)
        elif suffix == ".toml":
            data = _load_toml(path)
        elif suffix == ".ini":
            data = _load_ini(path)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {suffix}")
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a mapping")

    section = data.get(CONFIG_SECTION)
    if isinstance(section, dict):
        return dict(section)
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration dictionaries, later ones take precedence."""
    result: dict[str, Any] = {}

    for config in configs:
        result.update(config)

    return result


def build_config(data: dict[str, Any]) -> FinderConfig:
    """Validate a configuration dictionary into a FinderConfig.

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return FinderConfig.from_dict(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid finder configuration: {e}") from e


class ConfigLoader:
    """Configuration loader with support for multiple sources.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = True,
    ):
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
        self.load_env = load_env
        self.auto_find = auto_find

    def load(self, overrides: Optional[dict[str, Any]] = None) -> FinderConfig:
        """Load configuration from all sources."""
        configs = []

        config_path = self.config_file
        if config_path is None and self.auto_find:
            config_path = find_config_file(search_paths=self.search_paths)
        if config_path is not None:
            configs.append(load_file(config_path))

        if self.load_env:
            try:
                configs.append(load_env_config())
            except ValueError as e:
                raise ConfigurationError(f"Invalid environment configuration: {e}") from e

        if overrides:
            configs.append(overrides)

        return build_config(merge_configs(*configs))


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> FinderConfig:
    """Convenience function to load configuration.

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables

    Returns:
        Loaded configuration
    """
    loader = ConfigLoader(config_file=config_file, load_env=load_env)
    return loader.load(overrides=overrides)


def save_config(
    config: FinderConfig,
    path: Union[str, Path],
    format: str = "json",
) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save
        path: Output file path
        format: Output format (json, yaml)

    Raises:
        ConfigurationError: If format is not supported
    """
    path = Path(path)
    data = {CONFIG_SECTION: config.to_dict()}

    if format == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    elif format in ("yaml", "yml"):
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)
    else:
        raise ConfigurationError(f"Unsupported output format: {format}")


# Built-in configuration profiles
PROFILES = {
    "fast": {
        "default_wait_time": 0.0,
    },
    "patient": {
        "default_wait_time": 10.0,
        "polling_interval": 0.1,
    },
    "strict": {
        "ignore_hidden_elements": True,
        "prefer_visible_elements": False,
    },
}


def load_profile(name: str) -> dict[str, Any]:
    """Load a built-in configuration profile.

    Raises:
        ConfigurationError: If profile not found
    """
    if name not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile: {name}. "
            f"Available profiles: {', '.join(PROFILES.keys())}"
        )

    return PROFILES[name].copy()


def load_config_with_profile(
    profile: str,
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> FinderConfig:
    """Load configuration with a profile applied over file and env values."""
    loader = ConfigLoader(config_file=config_file, load_env=True)
    base_config = loader.load()

    merged = merge_configs(
        base_config.to_dict(),
        load_profile(profile),
        overrides or {},
    )
    return build_config(merged)
