"""Core scanner module for redactcheck.

This module provides the Scanner class, which drives one scan run: it
discovers the files of a target, classifies each one, and folds the
results into a ReportAggregator. Files are classified sequentially by
default or on a bounded thread pool; either way the results are
aggregated by the scanning thread in discovery order.

A run moves through a fixed sequence of states and never revisits one::

    IDLE -> DISCOVERING -> SCANNING -> AGGREGATING -> REPORTING -> GATING -> TERMINAL

The scanner covers the states up to AGGREGATING; reporting and gating are
driven by ``redactcheck.api.run``.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from pathlib import Path

from redactcheck.core.aggregator import ReportAggregator
from redactcheck.core.discovery import discover_files
from redactcheck.core.exceptions import EmptyTargetError, ScanError
from redactcheck.core.models import FileResult, ScanConfig, ScanResult
from redactcheck.detectors import PatternRegistry
from redactcheck.detectors.classifier import FileClassifier

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """States of a scan run, in the only order they may be entered."""

    IDLE = "idle"
    DISCOVERING = "discovering"
    SCANNING = "scanning"
    AGGREGATING = "aggregating"
    REPORTING = "reporting"
    GATING = "gating"
    TERMINAL = "terminal"


_RUN_ORDER = list(RunState)


class RunStateMachine:
    """Tracks a run's state and rejects any transition but the next one."""

    def __init__(self) -> None:
        self._state = RunState.IDLE

    @property
    def state(self) -> RunState:
        return self._state

    def advance(self, new_state: RunState) -> None:
        """Move to the next state.

        Raises:
            ScanError: If ``new_state`` is not the state that follows the
                current one.
        """
        index = _RUN_ORDER.index(self._state)
        if index + 1 >= len(_RUN_ORDER) or _RUN_ORDER[index + 1] is not new_state:
            raise ScanError(
                f"Invalid run transition {self._state.value} -> {new_state.value}",
                context={"state": self._state.value},
            )
        logger.debug("Run state: %s -> %s", self._state.value, new_state.value)
        self._state = new_state


class Scanner:
    """Scans a file or directory for sensitive content.

    A Scanner is one-shot: create a new one for every run.

    Example:
        scanner = Scanner(ScanConfig(target_path=Path("docs"), recursive=True))
        result = scanner.scan()
        print(result.summary.verdict)
    """

    def __init__(
        self,
        config: ScanConfig,
        registry: PatternRegistry | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            config: Scan configuration specifying target and options.
            registry: Compiled rules to use. Defaults to the canonical rules.
            cancel_event: Optional event that stops the run between files
                when set. One is created if not given.
        """
        self.config = config
        self.classifier = FileClassifier(registry)
        self.aggregator = ReportAggregator()
        self.state_machine = RunStateMachine()
        self._cancel_event = cancel_event or threading.Event()

    @property
    def state(self) -> RunState:
        return self.state_machine.state

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """Request cancellation of the ongoing scan.

        Files already being classified are finished; no further file is
        started. Results up to that point are still summarized.
        """
        self._cancel_event.set()
        logger.info("Scan cancellation requested")

    def _classify(self, path: Path) -> FileResult | None:
        if self.is_cancelled:
            return None
        logger.debug("Classifying %s", path)
        return self.classifier.classify(path)

    def _scan_files(self, files: list[Path]) -> list[FileResult]:
        results: list[FileResult] = []

        if self.config.workers == 1:
            for path in files:
                result = self._classify(path)
                if result is None:
                    break
                results.append(result)
                self.aggregator.add(result)
            return results

        with ThreadPoolExecutor(
            max_workers=self.config.workers, thread_name_prefix="redactcheck"
        ) as pool:
            futures = [pool.submit(self._classify, path) for path in files]
            for future in futures:
                result = future.result()
                if result is None:
                    continue
                results.append(result)
                self.aggregator.add(result)
        return results

    def discover(self) -> list[Path]:
        """Resolve the configured target into the list of files to scan.

        Raises:
            TargetNotFoundError: If the target does not exist.
            EmptyTargetError: If the target holds no scannable files.
        """
        target = self.config.target_path
        files = discover_files(target, recursive=self.config.recursive, exclude=self.config.exclude)
        if not files:
            raise EmptyTargetError(f"No scannable files found in: {target}", path=str(target))
        return files

    def scan(self) -> ScanResult:
        """Execute the scan run.

        Returns:
            ScanResult with per-file results in discovery order and the
            finalized summary.

        Raises:
            ScanError: If this scanner has already run.
            TargetNotFoundError: If the target does not exist.
            EmptyTargetError: If the target holds no scannable files.
        """
        if self.state is not RunState.IDLE:
            raise ScanError("Scanner has already run", context={"state": self.state.value})

        start_time = time.time()

        self.state_machine.advance(RunState.DISCOVERING)
        files = self.discover()
        logger.info("Found %d files to scan", len(files))

        self.state_machine.advance(RunState.SCANNING)
        results = self._scan_files(files)

        self.state_machine.advance(RunState.AGGREGATING)
        summary = self.aggregator.finalize()

        if self.is_cancelled:
            logger.warning("Scan cancelled after %d of %d files", len(results), len(files))

        return ScanResult(
            target_path=str(self.config.target_path),
            results=results,
            summary=summary,
            files_discovered=len(files),
            errors=list(self.aggregator.errors),
            cancelled=self.is_cancelled,
            scan_duration=time.time() - start_time,
        )
