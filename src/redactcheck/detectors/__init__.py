"""Pattern registry for redactcheck.

This module holds the canonical rule table and the PatternRegistry that
compiles it. A registry is an immutable value: it is built once at
startup, fails fast on any rule that does not compile, and is then only
read by the classifier for the duration of a run.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from redactcheck.core.exceptions import RuleCompilationError
from redactcheck.core.models import MatchKind, Tier
from redactcheck.detectors.patterns import KEY_VALUE_GROUPS, PatternRule
from redactcheck.detectors.patterns.restricted import RESTRICTED_PATTERNS
from redactcheck.detectors.patterns.secrets import SECRET_PATTERNS

logger = logging.getLogger(__name__)

# The full, statically enumerable rule set: Tier-1 rules, then Tier-2 rules
SENSITIVITY_RULES: tuple[PatternRule, ...] = SECRET_PATTERNS + RESTRICTED_PATTERNS

_TIER_ORDER = {Tier.T1: 0, Tier.T2: 1}


@dataclass(frozen=True)
class CompiledRule:
    """A PatternRule together with its compiled regular expression."""

    rule: PatternRule
    pattern: re.Pattern[str]

    @property
    def label(self) -> str:
        return self.rule.label

    @property
    def tier(self) -> Tier:
        return self.rule.tier

    @property
    def match_kind(self) -> MatchKind:
        return self.rule.match_kind


class PatternRegistry:
    """Immutable, ordered collection of compiled detection rules.

    Rules are ordered Tier-1 first, then Tier-2, each tier keeping its
    declaration order, so iteration order (and therefore finding order)
    is identical across runs. There is no API for adding or removing
    rules once the registry exists.

    Example:
        >>> registry = PatternRegistry.default()
        >>> [rule.label for rule in registry.tier(Tier.T2)][:2]
        ['IPV4_PRIVATE_10', 'IPV4_PRIVATE_172']
    """

    def __init__(self, rules: Iterable[PatternRule] | None = None) -> None:
        """Compile and validate the given rules.

        Args:
            rules: Rules to compile. Defaults to the canonical rule table.

        Raises:
            RuleCompilationError: If a rule's regex does not compile, a
                key/value rule lacks the named groups the redactor needs,
                or two rules share a label.
        """
        source = SENSITIVITY_RULES if rules is None else tuple(rules)

        compiled: list[CompiledRule] = []
        seen: set[str] = set()
        for rule in source:
            if rule.label in seen:
                raise RuleCompilationError("Duplicate rule label", label=rule.label)
            seen.add(rule.label)

            try:
                pattern = re.compile(rule.regex)
            except re.error as e:
                raise RuleCompilationError(f"Invalid regex pattern: {e}", label=rule.label) from e

            if rule.match_kind is MatchKind.KEY_VALUE:
                missing = [g for g in KEY_VALUE_GROUPS if g not in pattern.groupindex]
                if missing:
                    raise RuleCompilationError(
                        f"Key/value rule is missing named groups: {', '.join(missing)}",
                        label=rule.label,
                    )

            compiled.append(CompiledRule(rule=rule, pattern=pattern))

        # sorted() is stable, so declaration order is kept within a tier
        self._rules = tuple(sorted(compiled, key=lambda c: _TIER_ORDER[c.tier]))
        self._by_label = MappingProxyType({c.label: c for c in self._rules})
        logger.debug(
            "Compiled %d rules (%d T1, %d T2)",
            len(self._rules),
            len(self.tier(Tier.T1)),
            len(self.tier(Tier.T2)),
        )

    @classmethod
    def default(cls) -> PatternRegistry:
        """Build a registry from the canonical rule table."""
        return cls(SENSITIVITY_RULES)

    def rules(self) -> tuple[CompiledRule, ...]:
        """Return every compiled rule in evaluation order."""
        return self._rules

    def tier(self, tier: Tier) -> tuple[CompiledRule, ...]:
        """Return the compiled rules of one tier, in evaluation order."""
        return tuple(c for c in self._rules if c.tier is tier)

    def get(self, label: str) -> CompiledRule:
        """Retrieve a compiled rule by label.

        Raises:
            KeyError: If no rule with the given label exists.
        """
        if label not in self._by_label:
            raise KeyError(f"Rule '{label}' is not registered")
        return self._by_label[label]

    def __iter__(self) -> Iterator[CompiledRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label
