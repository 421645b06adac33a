"""Report aggregation for redactcheck.

This module provides the ReportAggregator, which folds per-file results
into run-wide counters and produces the immutable ScanSummary once every
file has been processed.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from redactcheck.core.models import FileResult, FileStatus, ScanSummary, SkipReason, Verdict


@dataclass(frozen=True)
class SkippedFile:
    """Information about a file that was not classified.

    Attributes:
        file_path: Path to the file that was skipped.
        reason: Reason the file was skipped.
        detail: Optional additional detail about why the file was skipped.
    """

    file_path: str
    reason: SkipReason
    detail: str | None = None


class ReportAggregator:
    """Accumulates FileResults into run-wide totals.

    Skipped files (binary or unreadable) are tracked separately and never
    count as scanned, clean or flagged. A file is flagged when it has at
    least one finding of either tier, so ``files_scanned`` always equals
    ``files_clean + files_flagged``.

    Increments are serialized with a lock so results may be added from
    several threads.

    Example:
        >>> aggregator = ReportAggregator()
        >>> aggregator.add(classifier.classify(path))
        >>> summary = aggregator.finalize()
        >>> summary.verdict
        <Verdict.CLEAR: 'CLEAR'>
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._finalized = False
        self.files_scanned = 0
        self.files_clean = 0
        self.files_flagged = 0
        self.tier1_total = 0
        self.tier2_total = 0
        self.skipped_files: list[SkippedFile] = []
        self.errors: list[str] = []

    @property
    def files_skipped(self) -> int:
        return len(self.skipped_files)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def add(self, result: FileResult) -> None:
        """Fold one file's result into the running totals.

        Args:
            result: The FileResult to record.

        Raises:
            RuntimeError: If the aggregator has already been finalized.
        """
        with self._lock:
            if self._finalized:
                raise RuntimeError("Cannot add results to a finalized aggregator")

            if result.skip_reason is not None:
                self.skipped_files.append(
                    SkippedFile(result.path, result.skip_reason, result.detail)
                )
                if result.skip_reason is not SkipReason.BINARY_FILE:
                    self.errors.append(f"{result.path}: {result.detail}")
                return

            self.files_scanned += 1
            self.tier1_total += result.tier1_count
            self.tier2_total += result.tier2_count
            if result.status is FileStatus.CLEAN:
                self.files_clean += 1
            else:
                self.files_flagged += 1

    def finalize(self) -> ScanSummary:
        """Close the aggregator and return the run summary.

        Calling finalize() again returns an equal summary.
        """
        with self._lock:
            self._finalized = True
            return ScanSummary(
                files_scanned=self.files_scanned,
                files_clean=self.files_clean,
                files_flagged=self.files_flagged,
                files_skipped=len(self.skipped_files),
                tier1_total=self.tier1_total,
                tier2_total=self.tier2_total,
                verdict=Verdict.from_totals(self.tier1_total, self.tier2_total),
            )
