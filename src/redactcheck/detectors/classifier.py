"""File classifier for redactcheck.

This module applies a PatternRegistry to the content of one file and
produces its FileResult. Every Tier-1 rule is evaluated before every
Tier-2 rule; within a rule, lines are visited in order and every
occurrence on a line yields its own Finding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from redactcheck.core.exceptions import FileReadError
from redactcheck.core.file_reader import read_file
from redactcheck.core.models import FileResult, Finding, MatchKind, SkipReason
from redactcheck.core.redaction import Redactor
from redactcheck.detectors import PatternRegistry

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text into newline-delimited lines, dropping CR line endings."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class FileClassifier:
    """Classifies files against a registry of detection rules.

    The classifier holds no per-file state, so one instance can be shared
    by several worker threads.

    Example:
        classifier = FileClassifier(PatternRegistry.default())
        result = classifier.classify(Path("notes/router.txt"))
        for finding in result.findings:
            print(finding.tag, finding.line_number, finding.display_line)
    """

    def __init__(self, registry: PatternRegistry | None = None) -> None:
        """Initialize the classifier.

        Args:
            registry: Compiled rules to apply. Defaults to the canonical
                rule table.
        """
        self.registry = registry if registry is not None else PatternRegistry.default()
        self._redactor = Redactor(self.registry)

    def iter_findings(self, file_path: str, text: str) -> Iterator[Finding]:
        """Lazily yield the findings for a file's text content.

        Args:
            file_path: Path recorded on each Finding.
            text: Decoded file content.

        Yields:
            Findings in rule order, then line order, then column order.
        """
        lines = split_lines(text)
        for compiled in self.registry.rules():
            for line_number, line in enumerate(lines, start=1):
                for match in compiled.pattern.finditer(line):
                    if compiled.match_kind is MatchKind.KEY_VALUE:
                        value = match.group("value")
                    else:
                        value = match.group(0)
                    yield Finding(
                        file_path=file_path,
                        line_number=line_number,
                        tier=compiled.tier,
                        label=compiled.label,
                        raw_line=line,
                        matched_value=value,
                        display_line=self._redactor.display(compiled, line, match),
                    )

    def classify_text(self, file_path: str, text: str) -> FileResult:
        """Classify already-decoded text content."""
        return FileResult.from_findings(file_path, list(self.iter_findings(file_path, text)))

    def classify(self, path: Path) -> FileResult:
        """Classify a single regular file.

        Binary files and files that cannot be read are returned as
        skipped results; neither raises.

        Args:
            path: Path to a regular file.

        Returns:
            The FileResult for the file.
        """
        file_path = str(path)
        try:
            content = read_file(path)
        except FileReadError as e:
            logger.warning("Skipping unreadable file %s: %s", file_path, e.message)
            reason = SkipReason.PERMISSION_DENIED if e.permission_denied else SkipReason.READ_ERROR
            return FileResult.skipped(file_path, reason, detail=e.message)

        if content.is_binary:
            logger.debug("Skipping binary file %s", file_path)
            return FileResult.skipped(file_path, SkipReason.BINARY_FILE)

        return self.classify_text(file_path, content.text or "")
