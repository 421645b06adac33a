"""Configuration schema definitions using Pydantic Settings.

This module defines the redactcheck configuration model with validation,
defaults, and documentation. Configuration controls how a scan runs; it
never adds to or alters the detection rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class RedactCheckConfig(BaseSettings):
    """Main configuration for redactcheck.

    Can be loaded from config files and environment variables, or
    constructed programmatically. See ``redactcheck.config.load_config``
    for how the sources are layered.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDACTCHECK_",
        case_sensitive=False,
        extra="ignore",
    )

    recursive: bool = Field(
        default=False,
        description="Whether to descend into subdirectories of a directory target",
    )
    strict: bool = Field(
        default=False,
        description="Fail the run (exit 1) when Tier-1 findings exist",
    )
    quiet: bool = Field(
        default=False,
        description="Render the summary only",
    )
    workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Number of threads classifying files",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns of files and directories to leave out",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )

    @field_validator("exclude", mode="before")
    @classmethod
    def parse_exclude(cls, v: Any) -> list[str]:
        """Parse exclude patterns from a comma-separated string or list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return list(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> LogLevel:
        """Validate and normalize log level."""
        if v is None:
            return LogLevel.WARNING
        if isinstance(v, LogLevel):
            return v
        v = str(v).lower()
        try:
            return LogLevel(v)
        except ValueError:
            valid = ", ".join(level.value for level in LogLevel)
            raise ValueError(f"log_level must be one of: {valid}")
