"""
Process-wide default finder configuration.

Sessions created without an explicit config read the current default at the
start of every call. The default is built lazily from NODEFINDER_* variables
the first time it is needed.
"""

import logging
import threading
from typing import Any, Optional

from .loader import ConfigurationError
from .env import load_env_config
from .options import FinderConfig

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default_config: Optional[FinderConfig] = None


def get_default_config() -> FinderConfig:
    """Get the process-wide default configuration."""
    global _default_config
    if _default_config is None:
        with _lock:
            if _default_config is None:
                try:
                    _default_config = FinderConfig(**load_env_config())
                except ValueError as e:
                    raise ConfigurationError(
                        f"Invalid environment configuration: {e}"
                    ) from e
                logger.debug(f"Default finder config initialised: {_default_config}")
    return _default_config


def set_default_config(config: FinderConfig) -> FinderConfig:
    """Replace the process-wide default configuration.

    Returns:
        The configuration that was replaced.
    """
    global _default_config
    previous = get_default_config()
    with _lock:
        _default_config = config
    return previous


def configure(**changes: Any) -> FinderConfig:
    """Change some process-wide defaults and return the new configuration.

    Example:
        configure(default_wait_time=5, ignore_hidden_elements=True)
    """
    config = get_default_config().replace(**changes)
    set_default_config(config)
    return config


def reset_default_config() -> None:
    """Drop the current default so it is rebuilt from the environment."""
    global _default_config
    with _lock:
        _default_config = None
