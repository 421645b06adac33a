"""Configuration file loading and discovery.

This module handles finding and loading configuration files in TOML,
YAML and JSON formats.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from redactcheck.config.schema import RedactCheckConfig
from redactcheck.core.exceptions import ConfigError

# Config file names to search for (in order of preference)
CONFIG_FILE_NAMES = [
    ".redactcheck.toml",
    ".redactcheck.yml",
    ".redactcheck.yaml",
    "redactcheck.json",
]


class ConfigLoader:
    """Loads and parses configuration files.

    Handles discovery of config files in the working directory and its
    parents.
    """

    def find_config_file(self, start_path: Path | None = None) -> Path | None:
        """Find a configuration file by walking up from a directory.

        Args:
            start_path: Directory to start searching from (defaults to cwd).

        Returns:
            Path to the first config file found, None otherwise.
        """
        start = Path(start_path).resolve() if start_path else Path.cwd()

        for search_dir in (start, *start.parents):
            for config_name in CONFIG_FILE_NAMES:
                config_path = search_dir / config_name
                if config_path.is_file():
                    return config_path

        return None

    def load(self, path: Path | str) -> RedactCheckConfig:
        """Load configuration from a file.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Configuration path is not a file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read config file {path}: {e}") from e

        data = self._load_content(content, path)
        return self._parse_config(data, path)

    def _load_content(self, content: str, path: Path) -> dict[str, Any]:
        suffix = path.suffix.lower()

        if suffix in (".yml", ".yaml"):
            return self._load_yaml(content, path)
        elif suffix == ".toml":
            return self._load_toml(content, path)
        else:
            return self._load_json(content, path)

    def _load_yaml(self, content: str, path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping, got: {type(data).__name__}")
        return data

    def _load_toml(self, content: str, path: Path) -> dict[str, Any]:
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    def _load_json(self, content: str, path: Path) -> dict[str, Any]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain an object, got: {type(data).__name__}")
        return data

    def _parse_config(self, data: dict[str, Any], path: Path) -> RedactCheckConfig:
        """Validate a configuration dictionary.

        Raises:
            ConfigError: If validation fails.
        """
        try:
            return RedactCheckConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {describe_validation_error(e)}") from e


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a ValidationError into one line per field."""
    return "; ".join(
        f"{'.'.join(str(x) for x in item['loc'])}: {item['msg']}" for item in error.errors()
    )
