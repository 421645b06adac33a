"""Console sink for redactcheck.

This module prints report lines to a Rich console, keeping the styling
carried in each line's markup.
"""

from rich.console import Console

from redactcheck.outputs import BaseOutput, ReportLine


class ConsoleOutput(BaseOutput):
    """Sink that prints each report line to a Rich console.

    Lines are printed with soft wrapping so long findings are never split,
    and with highlighting and emoji codes disabled so scanned content is
    shown exactly as it appears in the file.

    Example:
        output = ConsoleOutput()
        broadcast(renderer.render(result, registry), [output])
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    @property
    def name(self) -> str:
        """Return the sink name."""
        return "console"

    def emit(self, line: ReportLine) -> None:
        self.console.print(line.markup, soft_wrap=True, highlight=False, emoji=False)
