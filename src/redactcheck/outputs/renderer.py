"""Report rendering for redactcheck.

This module turns a finished ScanResult into the ordered lines of the
scan report: an optional header, one section per file, and the summary
with its verdict banner. Findings are rendered through their
``display_line`` only; the raw line and matched value never reach a sink.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from rich.markup import escape

from redactcheck import __version__
from redactcheck.core.models import FileResult, FileStatus, ScanResult, SkipReason, Tier, Verdict
from redactcheck.detectors import PatternRegistry
from redactcheck.outputs import ReportLine

RULE_LINE = "━" * 62
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

STATUS_STYLES = {
    FileStatus.FLAGGED: "bold red",
    FileStatus.CAUTION: "bold yellow",
    FileStatus.CLEAN: "green",
    FileStatus.SKIPPED: "dim",
}

TIER_STYLES = {
    Tier.T1: "red",
    Tier.T2: "yellow",
}

SKIP_LABELS = {
    SkipReason.BINARY_FILE: "binary",
    SkipReason.READ_ERROR: "read error",
    SkipReason.PERMISSION_DENIED: "permission denied",
}


class ReportRenderer:
    """Renders scan results as report lines.

    Example:
        renderer = ReportRenderer(quiet=False)
        lines = renderer.render(result, registry, recursive=True, strict=True)
        broadcast(lines, [ConsoleOutput(console)])
    """

    def __init__(self, quiet: bool = False, clock: Callable[[], datetime] = datetime.now) -> None:
        """Initialize the renderer.

        Args:
            quiet: If True, render the summary only.
            clock: Wall-clock source for the report timestamp.
        """
        self.quiet = quiet
        self.clock = clock

    def header(
        self,
        result: ScanResult,
        registry: PatternRegistry,
        recursive: bool,
        strict: bool,
    ) -> list[ReportLine]:
        """Render the report header."""
        mode = "Recursive" if recursive else "Single-level"
        if strict:
            mode += "  |  STRICT"
        return [
            ReportLine(f"  [bold]REDACTION COMPLIANCE SCANNER[/bold]  [dim]//  v{__version__}[/dim]"),
            ReportLine(f"  [dim]{RULE_LINE}[/dim]"),
            ReportLine(""),
            ReportLine(f"  [bold]TARGET[/bold]    {escape(result.target_path)}"),
            ReportLine(f"  [bold]MODE[/bold]      {mode}"),
            ReportLine(f"  [bold]FILES[/bold]     {result.files_discovered} queued for scan"),
            ReportLine(""),
            ReportLine(f"  [dim]T1 SECRET patterns:     {len(registry.tier(Tier.T1))} rules[/dim]"),
            ReportLine(f"  [dim]T2 RESTRICTED patterns: {len(registry.tier(Tier.T2))} rules[/dim]"),
            ReportLine(""),
            ReportLine(f"  [dim]{RULE_LINE}[/dim]"),
        ]

    def file_section(self, result: FileResult) -> list[ReportLine]:
        """Render the lines for one file."""
        path = escape(result.path)
        style = STATUS_STYLES[result.status]

        if result.is_skipped:
            reason = SKIP_LABELS[result.skip_reason] if result.skip_reason else "skipped"
            if result.detail:
                reason = f"{reason}: {escape(result.detail)}"
            return [ReportLine(f"  [{style}]SKIP[/{style}]  [dim]{path} ({reason})[/dim]")]

        if result.status is FileStatus.CLEAN:
            return [ReportLine(f"  [{style}][CLEAN][/{style}]    {path}", reportable=True)]

        tag = "FLAGGED" if result.status is FileStatus.FLAGGED else "CAUTION"
        lines = [
            ReportLine(""),
            ReportLine(f"  [{style}][{tag}][/{style}]  {path}", reportable=True),
            ReportLine(
                f"  [dim]T1 hits: {result.tier1_count}  |  T2 hits: {result.tier2_count}[/dim]",
                reportable=True,
            ),
        ]
        for finding in result.findings:
            tier_style = TIER_STYLES[finding.tier]
            lines.append(
                ReportLine(
                    f"    [{tier_style}][{finding.tag}][/{tier_style}] "
                    f"line {finding.line_number}: {escape(finding.display_line)}",
                    reportable=True,
                )
            )
        lines.append(ReportLine(""))
        return lines

    def summary(self, result: ScanResult) -> list[ReportLine]:
        """Render the summary block and verdict banner."""
        summary = result.summary
        flagged_style = "red" if summary.files_flagged else "green"

        lines = [
            ReportLine(""),
            ReportLine(f"  [dim]{RULE_LINE}[/dim]"),
            ReportLine(
                f"  [bold]SCAN COMPLETE[/bold]  //  {self.clock().strftime(TIMESTAMP_FORMAT)}"
            ),
        ]
        if result.cancelled:
            scanned = len(result.results)
            lines.append(
                ReportLine(
                    f"  [yellow]SCAN CANCELLED[/yellow]  partial results for "
                    f"{scanned} of {result.files_discovered} files"
                )
            )
        lines.extend(
            [
                ReportLine(""),
                ReportLine(f"  Files scanned   [cyan]{summary.files_scanned}[/cyan]"),
                ReportLine(f"  Clean           [green]{summary.files_clean}[/green]"),
                ReportLine(
                    f"  Flagged         [{flagged_style}]{summary.files_flagged}[/{flagged_style}]"
                ),
            ]
        )
        if summary.files_skipped:
            lines.append(ReportLine(f"  Skipped         [dim]{summary.files_skipped}[/dim]"))
        if result.errors:
            lines.append(ReportLine(f"  Read errors     [yellow]{len(result.errors)}[/yellow]"))

        lines.append(ReportLine(""))
        if summary.tier1_total:
            lines.append(
                ReportLine(
                    f"  T1 (SECRET) hits      [bold red]{summary.tier1_total} -- DO NOT SHARE[/bold red]"
                )
            )
        else:
            lines.append(ReportLine("  T1 (SECRET) hits      [green]0[/green]"))
        if summary.tier2_total:
            lines.append(
                ReportLine(
                    f"  T2 (RESTRICTED) hits  [yellow]{summary.tier2_total} -- review before sharing[/yellow]"
                )
            )
        else:
            lines.append(ReportLine("  T2 (RESTRICTED) hits  [green]0[/green]"))
        lines.append(ReportLine(""))

        lines.extend(self.verdict_banner(summary.verdict))
        lines.append(ReportLine(f"  [dim]{RULE_LINE}[/dim]"))
        lines.append(ReportLine(""))
        return lines

    def verdict_banner(self, verdict: Verdict) -> list[ReportLine]:
        """Render the closing banner for a verdict."""
        if verdict is Verdict.BLOCKED:
            return [
                ReportLine("  [bold red]⚠  T1 EXPOSURE DETECTED -- REDACT BEFORE TRANSMITTING[/bold red]"),
                ReportLine("  [dim]Replace T1 values with [REDACTED-T1] token[/dim]"),
            ]
        if verdict is Verdict.CAUTION:
            return [
                ReportLine("  [bold yellow]⚠  T2 DATA PRESENT -- REVIEW BEFORE SHARING EXTERNALLY[/bold yellow]"),
                ReportLine("  [dim]Replace with descriptive placeholders e.g. [DEVICE-IP][/dim]"),
            ]
        return [
            ReportLine("  [bold green]✓  NO SENSITIVE PATTERNS DETECTED -- CLEAR TO TRANSMIT[/bold green]"),
        ]

    def render(
        self,
        result: ScanResult,
        registry: PatternRegistry,
        recursive: bool = False,
        strict: bool = False,
    ) -> list[ReportLine]:
        """Render the full report for a scan result.

        In quiet mode only the summary is rendered, so the report holds no
        reportable lines.
        """
        lines: list[ReportLine] = []
        if not self.quiet:
            lines.extend(self.header(result, registry, recursive, strict))
            for file_result in result.results:
                lines.extend(self.file_section(file_result))
        lines.extend(self.summary(result))
        return lines
