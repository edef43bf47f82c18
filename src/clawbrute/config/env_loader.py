"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

from clawbrute.errors import ConfigurationError


def get_global_config_path() -> Path:
    """Return the path of the global ~/.clawbrute/config.yml file."""
    return Path.home() / ".clawbrute" / "config.yml"


def get_project_env_path(project_dir: Path | None = None) -> Path:
    """Return the project .env path (``.clawbrute/.env`` under ``project_dir``)."""
    base = project_dir if project_dir is not None else Path.cwd()
    return base / ".clawbrute" / ".env"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load global configuration from ~/.clawbrute/config.yml."""
    config_path = config_path or get_global_config_path()
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping of settings")
    return data


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from the .clawbrute/.env file."""
    return load_env_file(get_project_env_path(project_dir))
