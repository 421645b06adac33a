"""Allow running redactcheck with ``python -m redactcheck``."""

from redactcheck.cli.main import run_cli

if __name__ == "__main__":
    run_cli()
