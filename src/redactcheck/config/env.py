"""Environment variable mapping for redactcheck configuration.

This module defines the environment variables that can be used to
configure redactcheck and provides utilities for reading them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

# Environment variable names
ENV_CONFIG_PATH = "REDACTCHECK_CONFIG_PATH"
ENV_RECURSIVE = "REDACTCHECK_RECURSIVE"
ENV_STRICT = "REDACTCHECK_STRICT"
ENV_QUIET = "REDACTCHECK_QUIET"
ENV_WORKERS = "REDACTCHECK_WORKERS"
ENV_EXCLUDE = "REDACTCHECK_EXCLUDE"
ENV_LOG_LEVEL = "REDACTCHECK_LOG_LEVEL"


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def _parse_int(value: str) -> int | None:
    """Parse an integer from a string value.

    Returns:
        Integer value or None if parsing fails.
    """
    try:
        return int(value)
    except ValueError:
        return None


def _parse_list(value: str) -> list[str]:
    """Parse a list from a comma-separated string."""
    return [item.strip() for item in value.split(",") if item.strip()]


def get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables.

    Reads all supported environment variables and returns a dictionary
    of configuration values that can be merged with other config sources.
    Unparseable worker counts are ignored.
    """
    overrides: dict[str, Any] = {}

    # REDACTCHECK_CONFIG_PATH is handled separately (specifies config file location)

    for name, key in ((ENV_RECURSIVE, "recursive"), (ENV_STRICT, "strict"), (ENV_QUIET, "quiet")):
        if name in os.environ:
            overrides[key] = _parse_bool(os.environ[name])

    if ENV_WORKERS in os.environ:
        value = _parse_int(os.environ[ENV_WORKERS])
        if value is not None:
            overrides["workers"] = value

    if ENV_EXCLUDE in os.environ:
        overrides["exclude"] = _parse_list(os.environ[ENV_EXCLUDE])

    if ENV_LOG_LEVEL in os.environ:
        overrides["log_level"] = os.environ[ENV_LOG_LEVEL].lower()

    return overrides


def get_config_path_from_env() -> Path | None:
    """Get the config file path from environment variable.

    Returns:
        Path to config file if set and present, None otherwise.
    """
    if ENV_CONFIG_PATH in os.environ:
        path = Path(os.environ[ENV_CONFIG_PATH])
        if path.exists():
            return path
    return None
