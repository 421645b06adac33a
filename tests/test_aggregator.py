"""Tests for the ReportAggregator."""

from __future__ import annotations

import threading

import pytest

from redactcheck.core.aggregator import ReportAggregator, SkippedFile
from redactcheck.core.models import FileResult, Finding, SkipReason, Tier, Verdict


def _result(path: str, t1: int = 0, t2: int = 0) -> FileResult:
    findings = [
        Finding(
            file_path=path,
            line_number=i + 1,
            tier=tier,
            label="PASSWORD" if tier is Tier.T1 else "MAC_ADDRESS",
            raw_line="raw",
            matched_value="v",
            display_line="d",
        )
        for i, tier in enumerate([Tier.T1] * t1 + [Tier.T2] * t2)
    ]
    return FileResult.from_findings(path, findings)


class TestReportAggregator:
    """Tests for accumulating file results."""

    def test_empty_summary(self) -> None:
        """Test that an aggregator with no results finalizes to CLEAR."""
        summary = ReportAggregator().finalize()
        assert summary.files_scanned == 0
        assert summary.verdict is Verdict.CLEAR

    def test_counts(self) -> None:
        """Test that scanned, clean, flagged and tier totals are accumulated."""
        aggregator = ReportAggregator()
        aggregator.add(_result("clean.txt"))
        aggregator.add(_result("secret.txt", t1=2))
        aggregator.add(_result("net.txt", t2=3))
        summary = aggregator.finalize()
        assert summary.files_scanned == 3
        assert summary.files_clean == 1
        assert summary.files_flagged == 2
        assert summary.files_scanned == summary.files_clean + summary.files_flagged
        assert (summary.tier1_total, summary.tier2_total) == (2, 3)
        assert summary.verdict is Verdict.BLOCKED

    def test_tier2_only_is_caution(self) -> None:
        """Test that only Tier-2 findings give a CAUTION verdict."""
        aggregator = ReportAggregator()
        aggregator.add(_result("net.txt", t2=1))
        assert aggregator.finalize().verdict is Verdict.CAUTION

    def test_skipped_files_are_not_scanned(self) -> None:
        """Test that skipped files are tracked apart from scanned files."""
        aggregator = ReportAggregator()
        aggregator.add(FileResult.skipped("logo.png", SkipReason.BINARY_FILE))
        aggregator.add(FileResult.skipped("locked.txt", SkipReason.PERMISSION_DENIED, "denied"))
        summary = aggregator.finalize()
        assert summary.files_scanned == 0
        assert summary.files_skipped == 2
        assert aggregator.skipped_files[0] == SkippedFile("logo.png", SkipReason.BINARY_FILE)

    def test_only_read_failures_are_errors(self) -> None:
        """Test that binary files are skips, not errors."""
        aggregator = ReportAggregator()
        aggregator.add(FileResult.skipped("logo.png", SkipReason.BINARY_FILE))
        aggregator.add(FileResult.skipped("gone.txt", SkipReason.READ_ERROR, "No such file"))
        assert aggregator.errors == ["gone.txt: No such file"]

    def test_add_after_finalize_raises(self) -> None:
        """Test that a finalized aggregator rejects new results."""
        aggregator = ReportAggregator()
        aggregator.finalize()
        assert aggregator.is_finalized
        with pytest.raises(RuntimeError):
            aggregator.add(_result("late.txt"))

    def test_finalize_is_repeatable(self) -> None:
        """Test that finalizing twice gives equal summaries."""
        aggregator = ReportAggregator()
        aggregator.add(_result("a.txt", t1=1))
        assert aggregator.finalize() == aggregator.finalize()

    def test_concurrent_adds(self) -> None:
        """Test that increments from several threads are not lost."""
        aggregator = ReportAggregator()

        def _worker() -> None:
            for _ in range(200):
                aggregator.add(_result("a.txt", t1=1, t2=1))

        threads = [threading.Thread(target=_worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        summary = aggregator.finalize()
        assert summary.files_scanned == 800
        assert summary.tier1_total == 800
        assert summary.tier2_total == 800
