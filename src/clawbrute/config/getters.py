"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from clawbrute.engine.models import DEFAULT_CONCURRENCY
from clawbrute.errors import ConfigurationError

from .env_loader import load_global_config, load_project_config

DEFAULT_TIMEOUT = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory (defaults to the working directory)
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_default_concurrency(project_dir: Path | None = None) -> int:
    """Get the worker count used when the CLI is not given one (default: 100)."""
    value = get_config("CLAWBRUTE_CONCURRENCY", project_dir, default=DEFAULT_CONCURRENCY)
    try:
        concurrency = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"CLAWBRUTE_CONCURRENCY must be an integer, got {value!r}")
    if concurrency < 1:
        raise ConfigurationError(f"CLAWBRUTE_CONCURRENCY must be >= 1, got {concurrency}")
    return concurrency


def get_default_timeout(project_dir: Path | None = None) -> float:
    """Get the per-connection timeout in seconds (default: 10)."""
    value = get_config("CLAWBRUTE_TIMEOUT", project_dir, default=DEFAULT_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"CLAWBRUTE_TIMEOUT must be a number, got {value!r}")
    if timeout <= 0:
        raise ConfigurationError(f"CLAWBRUTE_TIMEOUT must be > 0, got {timeout}")
    return timeout


def is_verbose(project_dir: Path | None = None) -> bool:
    """Return True when verbose logging is enabled."""
    value = get_config("CLAWBRUTE_VERBOSE", project_dir, default=False)
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"CLAWBRUTE_VERBOSE must be true or false, got {value!r}")
