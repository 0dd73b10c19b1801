"""Configuration getter functions."""

import os
from typing import Any

from .env_loader import load_global_config, load_local_config

TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. .env file in the working directory
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    local_config = load_local_config()
    if key in local_config:
        return local_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def get_default_score() -> Any:
    """Default passing score (raw value, validated by the CLI)."""
    return get_config("SAFEPI_SCORE", default=100)


def get_default_report() -> str:
    """Default report format name."""
    return str(get_config("SAFEPI_REPORT", default="pretty"))


def get_default_output() -> str:
    """Default directory for HTML reports."""
    return str(get_config("SAFEPI_OUTPUT", default="./"))


def get_verbose() -> bool:
    """Whether verbose output is enabled through configuration."""
    value = get_config("SAFEPI_VERBOSE", default=False)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY
