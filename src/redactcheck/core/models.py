"""Core data models for redactcheck.

This module defines the Pydantic models used throughout redactcheck for
representing scan configuration, findings, per-file results and the
run-wide summary. Findings, file results and summaries are frozen: they
are created once during a run and never mutated afterwards.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Tier(str, Enum):
    """Sensitivity tiers for detection rules and findings."""

    T1 = "T1"
    T2 = "T2"

    @property
    def category(self) -> str:
        """Return the human-readable category name for this tier."""
        return "SECRET" if self is Tier.T1 else "RESTRICTED"


class MatchKind(str, Enum):
    """Shape of the text a rule matches."""

    KEY_VALUE = "key_value"
    STRUCTURAL = "structural"


class FileStatus(str, Enum):
    """Classification outcome for a single file."""

    SKIPPED = "skipped"
    CLEAN = "clean"
    CAUTION = "caution"
    FLAGGED = "flagged"


class SkipReason(str, Enum):
    """Reasons why a file may be skipped during scanning."""

    BINARY_FILE = "binary_file"
    READ_ERROR = "read_error"
    PERMISSION_DENIED = "permission_denied"


class Verdict(str, Enum):
    """Run-level verdict derived from the aggregate tier counts."""

    CLEAR = "CLEAR"
    CAUTION = "CAUTION"
    BLOCKED = "BLOCKED"

    @classmethod
    def from_totals(cls, tier1_total: int, tier2_total: int) -> Verdict:
        """Derive the verdict for the given tier totals."""
        if tier1_total > 0:
            return cls.BLOCKED
        if tier2_total > 0:
            return cls.CAUTION
        return cls.CLEAR


class Finding(BaseModel):
    """Represents one located rule match within a file.

    ``raw_line`` and ``matched_value`` hold the unredacted text and are
    kept out of the model repr; renderers only ever use ``display_line``.
    """

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(..., description="Path to the file where the finding was detected")
    line_number: int = Field(..., ge=1, description="1-based line number of the match")
    tier: Tier = Field(..., description="Sensitivity tier of the rule that matched")
    label: str = Field(..., description="Label of the rule that matched")
    raw_line: str = Field(..., repr=False, description="Verbatim line containing the match")
    matched_value: str = Field(
        ...,
        repr=False,
        description="The secret or identifier portion of the match",
    )
    display_line: str = Field(..., description="Safe-to-display form of the line")

    @property
    def tag(self) -> str:
        """Return the finding tag used in reports, e.g. ``T1-PASSWORD``."""
        return f"{self.tier.value}-{self.label}"


class FileResult(BaseModel):
    """Classification result for a single file.

    The status is fully determined by the tier counts: flagged when any
    Tier-1 finding exists, caution when only Tier-2 findings exist, clean
    when there are none. Skipped results carry a reason and no findings.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path of the classified file")
    status: FileStatus = Field(..., description="Classification outcome")
    findings: tuple[Finding, ...] = Field(default=(), description="Findings in rule order")
    tier1_count: int = Field(default=0, ge=0)
    tier2_count: int = Field(default=0, ge=0)
    skip_reason: SkipReason | None = Field(default=None, description="Why the file was skipped")
    detail: str | None = Field(default=None, description="Additional detail for skipped files")

    @model_validator(mode="after")
    def _check_status(self) -> FileResult:
        tier1 = sum(1 for f in self.findings if f.tier is Tier.T1)
        tier2 = len(self.findings) - tier1
        if (self.tier1_count, self.tier2_count) != (tier1, tier2):
            raise ValueError("tier counts do not match findings")

        if self.status is FileStatus.SKIPPED:
            if self.findings or self.skip_reason is None:
                raise ValueError("skipped results need a reason and no findings")
            return self

        if self.skip_reason is not None:
            raise ValueError("only skipped results carry a skip reason")
        if self.status is not status_for_counts(tier1, tier2):
            raise ValueError(f"status {self.status.value} inconsistent with tier counts")
        return self

    @classmethod
    def from_findings(cls, path: str, findings: list[Finding] | tuple[Finding, ...]) -> FileResult:
        """Build a result for a text file from its findings."""
        tier1 = sum(1 for f in findings if f.tier is Tier.T1)
        tier2 = len(findings) - tier1
        return cls(
            path=path,
            status=status_for_counts(tier1, tier2),
            findings=tuple(findings),
            tier1_count=tier1,
            tier2_count=tier2,
        )

    @classmethod
    def skipped(cls, path: str, reason: SkipReason, detail: str | None = None) -> FileResult:
        """Build a result for a file that was not classified."""
        return cls(path=path, status=FileStatus.SKIPPED, skip_reason=reason, detail=detail)

    @property
    def is_skipped(self) -> bool:
        return self.status is FileStatus.SKIPPED


def status_for_counts(tier1: int, tier2: int) -> FileStatus:
    """Return the file status implied by its tier counts."""
    if tier1 > 0:
        return FileStatus.FLAGGED
    if tier2 > 0:
        return FileStatus.CAUTION
    return FileStatus.CLEAN


class ScanSummary(BaseModel):
    """Run-wide counters and verdict, built once when a run is finalized."""

    model_config = ConfigDict(frozen=True)

    files_scanned: int = Field(default=0, ge=0, description="Text files classified")
    files_clean: int = Field(default=0, ge=0, description="Files with no findings")
    files_flagged: int = Field(default=0, ge=0, description="Files with at least one finding")
    files_skipped: int = Field(default=0, ge=0, description="Binary or unreadable files")
    tier1_total: int = Field(default=0, ge=0, description="Tier-1 (SECRET) findings")
    tier2_total: int = Field(default=0, ge=0, description="Tier-2 (RESTRICTED) findings")
    verdict: Verdict = Field(default=Verdict.CLEAR, description="Derived run verdict")

    @model_validator(mode="after")
    def _check_verdict(self) -> ScanSummary:
        if self.verdict is not Verdict.from_totals(self.tier1_total, self.tier2_total):
            raise ValueError("verdict inconsistent with tier totals")
        return self


class ScanConfig(BaseModel):
    """Configuration for a scan operation."""

    target_path: Path = Field(..., description="Path to scan (file or directory)")
    recursive: bool = Field(default=False, description="Whether to descend into subdirectories")
    workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Number of classifier threads (1 scans sequentially)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns of files or directories to leave out",
    )


class ScanResult(BaseModel):
    """Represents the complete result of a scan operation."""

    target_path: str = Field(..., description="The path that was scanned")
    results: list[FileResult] = Field(
        default_factory=list,
        description="Per-file results in discovery order",
    )
    summary: ScanSummary = Field(default_factory=ScanSummary, description="Finalized counters")
    files_discovered: int = Field(default=0, description="Files queued for scanning")
    errors: list[str] = Field(default_factory=list, description="Per-file read errors")
    cancelled: bool = Field(default=False, description="Whether the run stopped early")
    scan_duration: float = Field(default=0.0, description="Duration of the scan in seconds")

    @property
    def findings(self) -> list[Finding]:
        """Return every finding of the run, in file then rule order."""
        return [finding for result in self.results for finding in result.findings]
