"""Rule abstractions and the built-in rule catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Protocol, Tuple

from hardhat.severity import RULE_TIERS, Severity

CATALOG_VERSION = "1.0.0"


@dataclass(frozen=True)
class RuleMetadata:
    """Descriptive fields shared by every rule."""

    name: str
    severity: Severity
    remediation: str


class Rule(Protocol):
    """Protocol implemented by all line rules."""

    name: str
    severity: Severity
    remediation: str

    def test(self, line: str) -> bool:
        """Return ``True`` when ``line`` carries the rule's risk signal."""

    def describe(self) -> RuleMetadata:
        """Return the metadata reported alongside a match."""


@dataclass(frozen=True)
class PatternRule:
    """Rule backed by a single regular expression searched on each line."""

    name: str
    severity: Severity
    remediation: str
    pattern: re.Pattern = field(compare=False, repr=False)

    @classmethod
    def compile(
        cls,
        pattern: str,
        name: str,
        severity: Severity,
        remediation: str,
        flags: int = 0,
    ) -> "PatternRule":
        return cls(name=name, severity=severity, remediation=remediation, pattern=re.compile(pattern, flags))

    def test(self, line: str) -> bool:
        return self.pattern.search(line) is not None

    def describe(self) -> RuleMetadata:
        return RuleMetadata(name=self.name, severity=self.severity, remediation=self.remediation)


class RuleCatalog:
    """Read-only, ordered set of rules grouped into severity tiers."""

    def __init__(self, rules: Iterable[Rule], version: str = CATALOG_VERSION) -> None:
        tiers: Dict[Severity, list] = {tier: [] for tier in RULE_TIERS}
        for rule in rules:
            if rule.severity not in tiers:
                raise ValueError(f"Rule {rule.name!r} has no catalog tier for severity {rule.severity.value}")
            tiers[rule.severity].append(rule)
        self._tiers: Dict[Severity, Tuple[Rule, ...]] = {tier: tuple(items) for tier, items in tiers.items()}
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def rules_for_severity(self, tier: Severity) -> Tuple[Rule, ...]:
        return self._tiers.get(tier, ())

    def all_rules(self) -> Tuple[Rule, ...]:
        """Return every rule, CRITICAL tier first, in definition order."""

        return tuple(rule for tier in RULE_TIERS for rule in self._tiers[tier])

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._tiers.values())


def load_catalog() -> RuleCatalog:
    from .critical import get_rules as critical_rules
    from .high import get_rules as high_rules
    from .medium import get_rules as medium_rules

    return RuleCatalog([*critical_rules(), *high_rules(), *medium_rules()])
