"""Custom exception hierarchy for redactcheck.

This module defines the exception classes used throughout redactcheck
for error handling and reporting. All exceptions inherit from the
base RedactCheckError class, allowing callers to catch all redactcheck
errors with a single except clause.

Only usage, configuration and target-resolution errors are fatal to a
run. A FileReadError is recovered by the classifier, which records the
file as skipped and lets the scan continue.
"""

from __future__ import annotations


class RedactCheckError(Exception):
    """Base exception for all redactcheck errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary of additional context about the error.
    """

    def __init__(self, message: str, context: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Optional dictionary of additional context about the error.
        """
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including context if present."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UsageError(RedactCheckError):
    """Exception raised for invalid command-line usage.

    Raised before any file is scanned, for example when no target
    is given or an option value is out of range.

    Example:
        >>> raise UsageError("No target specified", option="TARGET")
    """

    def __init__(self, message: str, option: str | None = None, context: dict | None = None):
        """Initialize the usage error.

        Args:
            message: Human-readable error message.
            option: The option or argument that was misused.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if option:
            ctx["option"] = option
        super().__init__(message, ctx)
        self.option = option


class TargetNotFoundError(RedactCheckError):
    """Exception raised when the scan target does not exist.

    Example:
        >>> raise TargetNotFoundError("Target not found", path="/nonexistent")
    """

    def __init__(self, message: str, path: str | None = None, context: dict | None = None):
        """Initialize the target error.

        Args:
            message: Human-readable error message.
            path: The target path that could not be resolved.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path


class EmptyTargetError(TargetNotFoundError):
    """Exception raised when a target resolves to no scannable files."""


class FileReadError(RedactCheckError):
    """Exception raised when a single file cannot be read.

    This error is never fatal to a run: the classifier turns it into
    a skipped FileResult and the scan moves on to the next file.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        permission_denied: bool = False,
        context: dict | None = None,
    ):
        """Initialize the read error.

        Args:
            message: Human-readable error message.
            path: The file that could not be read.
            permission_denied: True if the failure was an access violation.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path
        self.permission_denied = permission_denied


class RuleCompilationError(RedactCheckError):
    """Exception raised when a detection rule fails to compile.

    Raised while building a PatternRegistry, before any file is touched.

    Example:
        >>> raise RuleCompilationError("unbalanced parenthesis", label="PASSWORD")
    """

    def __init__(self, message: str, label: str | None = None, context: dict | None = None):
        """Initialize the rule compilation error.

        Args:
            message: Human-readable error message.
            label: Label of the rule that failed to compile.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if label:
            ctx["label"] = label
        super().__init__(message, ctx)
        self.label = label


class ConfigError(RedactCheckError):
    """Exception raised for configuration errors.

    Example:
        >>> raise ConfigError("workers must be >= 1", config_key="workers")
    """

    def __init__(self, message: str, config_key: str | None = None, context: dict | None = None):
        """Initialize the config error.

        Args:
            message: Human-readable error message.
            config_key: The configuration key that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, ctx)
        self.config_key = config_key


class OutputError(RedactCheckError):
    """Exception raised when the persisted report cannot be written.

    Example:
        >>> raise OutputError("Failed to write report", output_path="/readonly/report.txt")
    """

    def __init__(self, message: str, output_path: str | None = None, context: dict | None = None):
        """Initialize the output error.

        Args:
            message: Human-readable error message.
            output_path: The output path that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if output_path:
            ctx["output_path"] = output_path
        super().__init__(message, ctx)
        self.output_path = output_path


class ScanError(RedactCheckError):
    """Exception raised when a scan run is driven incorrectly.

    Example:
        >>> raise ScanError("Scanner has already run", context={"state": "terminal"})
    """
