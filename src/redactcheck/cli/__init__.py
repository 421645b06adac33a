"""redactcheck CLI - Command-line interface for the redaction scanner."""

from redactcheck.cli.main import app, main, run_cli

__all__ = ["app", "main", "run_cli"]
