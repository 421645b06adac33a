"""Value redaction for redactcheck findings.

The scanner must never re-expose a secret it detected. This module derives
the safe-to-display form of every finding:

- Tier-1 key/value findings keep the key name and separator and replace
  the rest of the line with ``PLACEHOLDER``. The cut is made at the
  earliest Tier-1 separator found on the line, so a line holding several
  secrets never leaks one of them through another finding's display.
- Tier-1 structural findings (private key blocks) are displayed as
  ``BLOCK_PLACEHOLDER`` only; none of the block is echoed.
- Tier-2 findings are displayed verbatim for reviewer judgment, except
  that any Tier-1 value sharing the line is replaced by ``PLACEHOLDER``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from redactcheck.core.models import MatchKind, Tier

if TYPE_CHECKING:
    from redactcheck.detectors import CompiledRule, PatternRegistry

PLACEHOLDER = "[VALUE-REDACTED]"
BLOCK_PLACEHOLDER = "[KEY-BLOCK-REDACTED]"


class Redactor:
    """Builds display lines for findings produced by one registry.

    Example:
        >>> registry = PatternRegistry.default()
        >>> redactor = Redactor(registry)
        >>> rule = registry.get("PASSWORD")
        >>> line = "password=hunter2"
        >>> redactor.display(rule, line, rule.pattern.search(line))
        'password=[VALUE-REDACTED]'
    """

    def __init__(self, registry: PatternRegistry) -> None:
        self._key_value_rules = tuple(
            c for c in registry.tier(Tier.T1) if c.match_kind is MatchKind.KEY_VALUE
        )

    def first_separator_end(self, line: str) -> int | None:
        """Return the end offset of the earliest Tier-1 separator on a line."""
        ends = [
            match.end("sep")
            for compiled in self._key_value_rules
            for match in compiled.pattern.finditer(line)
        ]
        return min(ends) if ends else None

    def mask_values(self, line: str) -> str:
        """Replace every Tier-1 value on a line with ``PLACEHOLDER``.

        The rest of the line is kept as is. If a masked value still shows
        up in the kept text, the whole line is replaced by the placeholder.
        """
        spans = sorted(
            match.span("value")
            for compiled in self._key_value_rules
            for match in compiled.pattern.finditer(line)
        )
        if not spans:
            return line

        merged: list[list[int]] = []
        for start, end in spans:
            if merged and start <= merged[-1][1]:
                merged[-1][1] = max(merged[-1][1], end)
            else:
                merged.append([start, end])

        kept: list[str] = []
        position = 0
        for start, end in merged:
            kept.append(line[position:start])
            position = end
        kept.append(line[position:])

        visible = "\n".join(kept)
        if any(line[start:end] in visible for start, end in spans):
            return PLACEHOLDER
        return PLACEHOLDER.join(kept)

    def display(self, rule: CompiledRule, line: str, match: re.Match[str]) -> str:
        """Return the safe-to-display form of a matched line.

        A value that is a substring of ``PLACEHOLDER`` itself (``pass=RED``)
        only ever appears inside the placeholder token.

        Args:
            rule: The rule that produced the match.
            line: The verbatim line the match was found on.
            match: The regex match within ``line``.

        Returns:
            The line as it may appear in any console or report output.
        """
        if rule.tier is Tier.T2:
            return self.mask_values(line)

        if rule.match_kind is MatchKind.STRUCTURAL:
            return BLOCK_PLACEHOLDER

        cut = match.end("sep")
        earliest = self.first_separator_end(line)
        if earliest is not None:
            cut = min(cut, earliest)

        prefix = line[:cut]
        # e.g. "pass=pass": the value also spells the key
        if match.group("value") in prefix:
            return PLACEHOLDER
        return prefix + PLACEHOLDER
