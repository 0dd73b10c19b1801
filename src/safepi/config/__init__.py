"""
Configuration management for SafePI.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. .env file in the working directory
3. Global config file (~/.safepi/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import load_env_file, load_global_config, load_local_config
from .getters import (
    get_config,
    get_default_output,
    get_default_report,
    get_default_score,
    get_verbose,
)

__all__ = [
    # env_loader
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # getters
    "get_config",
    "get_default_output",
    "get_default_report",
    "get_default_score",
    "get_verbose",
]
