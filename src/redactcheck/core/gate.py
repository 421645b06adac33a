"""Exit gate for redactcheck.

Maps a finalized verdict and the run mode to the process exit decision.
Only Tier-1 findings can fail a run, and only in strict mode; Tier-2
findings never change the exit disposition.
"""

from enum import IntEnum

from redactcheck.core.models import Verdict


class ExitDisposition(IntEnum):
    """Process exit decision; the value is the exit code."""

    SUCCESS = 0
    FAILURE = 1


def decide(verdict: Verdict, strict: bool) -> ExitDisposition:
    """Decide the exit disposition for a finished run.

    Args:
        verdict: The run verdict from the finalized ScanSummary.
        strict: Whether strict mode is on.

    Returns:
        FAILURE if strict mode is on and Tier-1 findings exist (verdict
        BLOCKED), SUCCESS otherwise.
    """
    if strict and verdict is Verdict.BLOCKED:
        return ExitDisposition.FAILURE
    return ExitDisposition.SUCCESS
