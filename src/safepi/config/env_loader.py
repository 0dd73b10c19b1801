"""Environment variable and configuration file loading."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


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


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.safepi/config.yml."""
    config_path = Path.home() / ".safepi" / "config.yml"
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping of settings", config_path)
        return {}
    return data


def load_local_config(directory: Path | None = None) -> dict[str, str]:
    """Load the .env file from ``directory`` (the working directory by default)."""
    return load_env_file((directory or Path.cwd()) / ".env")
