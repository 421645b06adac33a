"""High-level API functions for redactcheck.

This module provides simple functions for using redactcheck as a library.
They hide the wiring of scanner, renderer, sinks and gate, so a caller can
check a path before sharing it with a few lines of code.

Example usage::

    from redactcheck.api import run, scan_path

    # Classify only
    result = scan_path("notes/", recursive=True)
    for finding in result.findings:
        print(f"{finding.file_path}:{finding.line_number} {finding.tag}")

    # Full pipeline: report to the console and a text file, then gate
    outcome = run("notes/", strict=True, output="scan-report.txt")
    raise SystemExit(outcome.exit_code)
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from redactcheck.core.gate import ExitDisposition, decide
from redactcheck.core.models import ScanConfig, ScanResult
from redactcheck.core.scanner import RunState, Scanner
from redactcheck.detectors import PatternRegistry
from redactcheck.outputs import BaseOutput, ReportLine, broadcast
from redactcheck.outputs.console_output import ConsoleOutput
from redactcheck.outputs.renderer import ReportRenderer
from redactcheck.outputs.text_output import TextReportOutput


@dataclass(frozen=True)
class RunOutcome:
    """Everything a completed run produced.

    Attributes:
        result: The scan result with per-file results and summary.
        lines: The rendered report lines, as emitted to every sink.
        disposition: The gate decision for the run.
        report_written: Whether a persisted report file was written.
    """

    result: ScanResult
    lines: tuple[ReportLine, ...]
    disposition: ExitDisposition
    report_written: bool = False

    @property
    def exit_code(self) -> int:
        return int(self.disposition)


def scan_path(
    path: str | Path,
    *,
    recursive: bool = False,
    workers: int = 1,
    exclude: list[str] | None = None,
    registry: PatternRegistry | None = None,
    cancel_event: threading.Event | None = None,
) -> ScanResult:
    """Scan a file or directory for sensitive content.

    Args:
        path: File or directory to scan.
        recursive: Whether to descend into subdirectories.
        workers: Number of classifier threads (1 scans sequentially).
        exclude: Glob patterns of files or directories to leave out.
        registry: Compiled rules to use. Defaults to the canonical rules.
        cancel_event: Optional event that stops the scan between files.

    Returns:
        ScanResult containing per-file results and the finalized summary.

    Raises:
        TargetNotFoundError: If the path does not exist.
        EmptyTargetError: If the path holds no scannable files.
    """
    config = ScanConfig(
        target_path=Path(path),
        recursive=recursive,
        workers=workers,
        exclude=exclude or [],
    )
    return Scanner(config, registry, cancel_event).scan()


def run(
    path: str | Path,
    *,
    recursive: bool = False,
    strict: bool = False,
    quiet: bool = False,
    workers: int = 1,
    exclude: list[str] | None = None,
    output: str | Path | None = None,
    outputs: Iterable[BaseOutput] | None = None,
    registry: PatternRegistry | None = None,
    cancel_event: threading.Event | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> RunOutcome:
    """Run the full pipeline: scan, report to every sink, then gate.

    Args:
        path: File or directory to scan.
        recursive: Whether to descend into subdirectories.
        strict: Whether Tier-1 findings fail the run.
        quiet: Render the summary only.
        workers: Number of classifier threads.
        exclude: Glob patterns of files or directories to leave out.
        output: Optional path for the persisted plain text report.
        outputs: Sinks for the report. Defaults to a console sink.
        registry: Compiled rules to use. Defaults to the canonical rules.
        cancel_event: Optional event that stops the scan between files.
        clock: Wall-clock source for the report timestamp.

    Returns:
        RunOutcome with the result, rendered lines and exit disposition.

    Raises:
        TargetNotFoundError: If the path does not exist.
        EmptyTargetError: If the path holds no scannable files.
        OutputError: If the report file cannot be written.
    """
    registry = registry if registry is not None else PatternRegistry.default()
    config = ScanConfig(
        target_path=Path(path),
        recursive=recursive,
        workers=workers,
        exclude=exclude or [],
    )
    scanner = Scanner(config, registry, cancel_event)
    result = scanner.scan()

    scanner.state_machine.advance(RunState.REPORTING)
    lines = ReportRenderer(quiet=quiet, clock=clock).render(
        result, registry, recursive=recursive, strict=strict
    )
    sinks = list(outputs) if outputs is not None else [ConsoleOutput()]
    report = TextReportOutput(output) if output is not None else None
    if report is not None:
        sinks.append(report)
    broadcast(lines, sinks)

    scanner.state_machine.advance(RunState.GATING)
    disposition = decide(result.summary.verdict, strict)
    scanner.state_machine.advance(RunState.TERMINAL)

    return RunOutcome(
        result=result,
        lines=tuple(lines),
        disposition=disposition,
        report_written=report is not None and report.written,
    )
