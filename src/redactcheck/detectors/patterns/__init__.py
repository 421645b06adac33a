"""Rule definitions for the sensitivity classifier.

This module provides the core data structure for declaring detection
rules. Rules are plain, immutable values: the full rule table lives in
the ``secrets`` (Tier-1) and ``restricted`` (Tier-2) modules and is only
compiled when a PatternRegistry is built.

Key/value rules must define three named groups so the redactor can find
the value it has to mask: ``key``, ``sep`` (the separator together with
its surrounding whitespace) and ``value``.
"""

from dataclasses import dataclass

from redactcheck.core.models import MatchKind, Tier

KEY_VALUE_GROUPS = ("key", "sep", "value")


@dataclass(frozen=True)
class PatternRule:
    """A detection rule for one kind of sensitive content.

    Attributes:
        label: Unique identifier for the rule (e.g. ``PASSWORD``).
        tier: Sensitivity tier of findings produced by this rule.
        regex: Regular expression pattern string, applied per line.
        match_kind: Whether the rule matches a key/value construct or a
            structural form.
        description: Human-readable description of what the rule detects.
    """

    label: str
    tier: Tier
    regex: str
    match_kind: MatchKind
    description: str = ""


__all__ = ["KEY_VALUE_GROUPS", "MatchKind", "PatternRule", "Tier"]
