"""Configuration management for redactcheck.

Settings are layered with the following priority:

1. CLI arguments (highest priority)
2. Environment variables
3. Configuration file
4. Default values (lowest priority)

Example usage::

    from redactcheck.config import load_config

    config = load_config(cli_args={"strict": True})
    print(config.workers)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from redactcheck.config.env import (
    ENV_CONFIG_PATH,
    get_config_path_from_env,
    get_env_overrides,
)
from redactcheck.config.loader import ConfigLoader, describe_validation_error
from redactcheck.config.schema import LogLevel, RedactCheckConfig
from redactcheck.core.exceptions import ConfigError

__all__ = [
    "ConfigLoader",
    "ENV_CONFIG_PATH",
    "LogLevel",
    "RedactCheckConfig",
    "get_env_overrides",
    "load_config",
]


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    result.update({k: v for k, v in override.items() if v is not None})
    return result


def load_config(
    config_path: Path | str | None = None,
    cli_args: dict[str, Any] | None = None,
    use_env: bool = True,
    use_file: bool = True,
) -> RedactCheckConfig:
    """Load configuration with proper priority handling.

    Configuration is merged in the following order (later sources override earlier):
    1. Default values
    2. Configuration file (explicit path, REDACTCHECK_CONFIG_PATH, or discovered)
    3. Environment variables
    4. CLI arguments (``None`` values are ignored)

    Args:
        config_path: Optional explicit path to a config file.
        cli_args: Optional dictionary of CLI argument overrides.
        use_env: Whether to apply environment variable overrides.
        use_file: Whether to look for and load config files.

    Returns:
        A fully merged RedactCheckConfig instance.

    Raises:
        ConfigError: If a config file or the merged configuration is invalid.
    """
    config_dict = RedactCheckConfig.model_validate({}).model_dump()

    if use_file or config_path:
        loader = ConfigLoader()
        file_path = config_path or get_config_path_from_env() or loader.find_config_file()
        if file_path:
            file_config = loader.load(file_path)
            config_dict = _merge(config_dict, file_config.model_dump(exclude_unset=True))

    if use_env:
        config_dict = _merge(config_dict, get_env_overrides())

    if cli_args:
        config_dict = _merge(config_dict, cli_args)

    try:
        return RedactCheckConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {describe_validation_error(e)}") from e
