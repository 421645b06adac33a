"""Plain text report sink for redactcheck.

This module persists the report as plain text: the same lines the console
shows, with all styling removed.
"""

import logging
from pathlib import Path

from redactcheck.core.exceptions import OutputError
from redactcheck.outputs import BaseOutput, ReportLine

logger = logging.getLogger(__name__)


class TextReportOutput(BaseOutput):
    """Sink that buffers plain report lines and writes them on close.

    The file is only written when at least one per-file result line was
    emitted. A report made of the summary alone (quiet mode) is not
    persisted.

    Example:
        output = TextReportOutput(Path("scan-report.txt"))
        broadcast(lines, [ConsoleOutput(), output])
        print(output.written)
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the sink.

        Args:
            path: Destination file for the report.
        """
        self.path = Path(path)
        self.written = False
        self._lines: list[str] = []
        self._has_results = False

    @property
    def name(self) -> str:
        """Return the sink name."""
        return "text"

    def emit(self, line: ReportLine) -> None:
        self._lines.append(line.plain)
        if line.reportable:
            self._has_results = True

    def close(self) -> None:
        """Write the buffered report.

        Raises:
            OutputError: If the report file cannot be written.
        """
        if not self._has_results:
            logger.warning("No per-file results rendered; report not written to %s", self.path)
            return

        try:
            self.path.write_text("\n".join(self._lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise OutputError(
                f"Failed to write report: {e.strerror or e}", output_path=str(self.path)
            ) from e

        self.written = True
        logger.info("Report written to %s", self.path)
