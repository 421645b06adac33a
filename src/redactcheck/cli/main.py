"""Command-line interface for redactcheck.

This module provides the Typer-based CLI that scans a file or directory
for credentials and network identifiers before it is shared, prints the
redacted report, optionally persists it, and gates the exit code.
"""

import logging
import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from redactcheck import __version__
from redactcheck.api import run
from redactcheck.config import load_config
from redactcheck.core.exceptions import (
    ConfigError,
    OutputError,
    RedactCheckError,
    RuleCompilationError,
    TargetNotFoundError,
    UsageError,
)
from redactcheck.core.logging import setup_logging
from redactcheck.outputs.console_output import ConsoleOutput

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE = 2  # Typer's status for command-line usage errors

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="redactcheck",
    help="redactcheck - check files for secrets and network identifiers before sharing them.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def _display_error(error: Exception, title: str = "Error") -> None:
    """Display an error with rich formatting.

    Args:
        error: The exception to display.
        title: The title for the error panel.
    """
    if isinstance(error, UsageError):
        message = f"[bold red]Usage Error[/bold red]\n\n{escape(error.message)}"
        message += "\n\n[dim]Try 'redactcheck --help' for help.[/dim]"
        error_console.print(Panel(message, title="[red]Usage Error[/red]", border_style="red"))
    elif isinstance(error, TargetNotFoundError):
        message = f"[bold red]Target Error[/bold red]\n\n{escape(error.message)}"
        error_console.print(Panel(message, title="[red]Target Error[/red]", border_style="red"))
    elif isinstance(error, ConfigError):
        message = f"[bold red]Configuration Error[/bold red]\n\n{escape(error.message)}"
        if error.config_key:
            message += f"\n\n[dim]Config key:[/dim] {escape(error.config_key)}"
        error_console.print(Panel(message, title="[red]Config Error[/red]", border_style="red"))
    elif isinstance(error, OutputError):
        message = f"[bold red]Output Error[/bold red]\n\n{escape(error.message)}"
        if error.output_path:
            message += f"\n\n[dim]Output path:[/dim] {escape(error.output_path)}"
        error_console.print(Panel(message, title="[red]Output Error[/red]", border_style="red"))
    elif isinstance(error, RuleCompilationError):
        message = f"[bold red]Rule Error[/bold red]\n\n{escape(error.message)}"
        if error.label:
            message += f"\n\n[dim]Rule:[/dim] {escape(error.label)}"
        error_console.print(Panel(message, title="[red]Rule Error[/red]", border_style="red"))
    elif isinstance(error, RedactCheckError):
        message = f"[bold red]Error[/bold red]\n\n{escape(error.message)}"
        error_console.print(Panel(message, title=f"[red]{title}[/red]", border_style="red"))
    else:
        error_console.print(
            Panel(
                f"[bold red]{title}[/bold red]\n\n{escape(str(error))}",
                title="[red]Error[/red]",
                border_style="red",
            )
        )


@contextmanager
def _cancel_on_interrupt(cancel_event: threading.Event) -> Iterator[None]:
    """Route SIGINT to the cancel event for the duration of a scan."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(signum, frame):
        error_console.print("\n[yellow]Scan interrupted; finishing current files[/yellow]")
        cancel_event.set()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]redactcheck[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.command()
def scan(
    target: Annotated[
        Optional[Path],
        typer.Argument(
            help="File or directory to scan",
            show_default=False,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Scan subdirectories recursively"),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", "-s", help="Exit 1 if any T1 (SECRET) pattern is found"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Save a plain text report to this file"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Summary only; suppress per-file output"),
    ] = False,
    workers: Annotated[
        Optional[int],
        typer.Option(
            "--workers",
            "-w",
            min=1,
            max=64,
            help="Number of threads classifying files (default 1)",
            show_default=False,
        ),
    ] = None,
    exclude: Annotated[
        Optional[List[str]],
        typer.Option(
            "--exclude",
            "-x",
            help="Glob pattern of files or directories to skip (repeatable)",
            show_default=False,
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a configuration file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Scan a file or directory for sensitive content before sharing it.

    T1 (SECRET) findings are passwords, keys and tokens; their values are
    never printed. T2 (RESTRICTED) findings are private IPs, MAC
    addresses, subnets and firmware versions, shown for review.

    Exit codes:
        0: Scan completed (findings do not fail the run unless --strict)
        1: T1 findings with --strict, or a usage, config or target error
    """
    if target is None:
        _display_error(UsageError("Missing argument 'TARGET'.", option="TARGET"))
        raise typer.Exit(code=EXIT_ERROR)

    try:
        config = load_config(
            config_path=config_path,
            cli_args={
                "recursive": True if recursive else None,
                "strict": True if strict else None,
                "quiet": True if quiet else None,
                "workers": workers,
                "exclude": exclude or None,
            },
        )
    except ConfigError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None

    level = logging.DEBUG if verbose else getattr(logging, config.log_level.value.upper())
    setup_logging(verbose=verbose, level=level)
    logger.debug("Effective configuration: %s", config.model_dump())

    cancel_event = threading.Event()
    try:
        with _cancel_on_interrupt(cancel_event):
            outcome = run(
                target,
                recursive=config.recursive,
                strict=config.strict,
                quiet=config.quiet,
                workers=config.workers,
                exclude=config.exclude,
                output=output,
                outputs=[ConsoleOutput(console)],
                cancel_event=cancel_event,
            )
    except RedactCheckError as e:
        _display_error(e)
        raise typer.Exit(code=EXIT_ERROR) from None

    if outcome.report_written and not config.quiet:
        console.print(f"  [dim]Report saved to:[/dim] {escape(str(output))}")

    raise typer.Exit(code=outcome.exit_code)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit code.

    Typer reports command-line usage errors (unknown options, bad option
    values) itself and exits with status 2; they are returned as 1.

    Args:
        argv: Command-line arguments, defaulting to ``sys.argv[1:]``.
    """
    try:
        app(args=argv, prog_name="redactcheck")
    except SystemExit as e:
        if e.code is None:
            return EXIT_SUCCESS
        if not isinstance(e.code, int) or e.code == EXIT_USAGE:
            return EXIT_ERROR
        return e.code
    return EXIT_SUCCESS


def run_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
