"""Output sinks for redactcheck.

A report is rendered once into a list of ReportLine values. Each line
carries Rich console markup; sinks decide how to present it. The console
sink prints the styled line, the text report sink writes the same line
with the styling stripped, so both sinks always agree on content.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from rich.text import Text


@dataclass(frozen=True)
class ReportLine:
    """One line of a rendered report.

    Attributes:
        markup: Line content with Rich markup for styling.
        reportable: True for per-file result lines. A persisted report is
            only written when at least one reportable line was emitted.
    """

    markup: str
    reportable: bool = False

    @property
    def plain(self) -> str:
        """Return the line with all styling removed."""
        return Text.from_markup(self.markup, emoji=False).plain


class BaseOutput(ABC):
    """Abstract base class for all report sinks.

    Subclasses must implement the `name` property and `emit` method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this sink (e.g. 'console', 'text')."""
        pass

    @abstractmethod
    def emit(self, line: ReportLine) -> None:
        """Present one report line."""
        pass

    def close(self) -> None:  # noqa: B027
        """Flush the sink. The default implementation does nothing."""


def broadcast(lines: Iterable[ReportLine], outputs: Iterable[BaseOutput]) -> None:
    """Emit every line to every sink, in order, then close the sinks.

    Args:
        lines: Rendered report lines.
        outputs: Sinks to drive from the same line stream.
    """
    sinks = list(outputs)
    for line in lines:
        for sink in sinks:
            sink.emit(line)
    for sink in sinks:
        sink.close()
