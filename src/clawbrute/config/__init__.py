"""
Configuration management for ClawBrute.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.clawbrute/.env)
3. Global config file (~/.clawbrute/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_path,
    get_project_env_path,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    DEFAULT_TIMEOUT,
    get_config,
    get_default_concurrency,
    get_default_timeout,
    is_verbose,
)

__all__ = [
    # env_loader
    "get_global_config_path",
    "get_project_env_path",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "DEFAULT_TIMEOUT",
    "get_config",
    "get_default_concurrency",
    "get_default_timeout",
    "is_verbose",
]
