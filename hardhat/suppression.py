"""False-positive suppression applied after a rule has matched a line.

The policy is a heuristic trade: it silences lines that *look* safe (an
environment lookup, a standard library import) and will therefore hide some
real problems written on the same line. It is not a proof of safety.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from .rules import Rule

LinePredicate = Callable[[str], bool]

ENV_ACCESS_PATTERN = re.compile(r"process\.env|os\.environ|os\.getenv")


def _matches(pattern: str) -> LinePredicate:
    compiled = re.compile(pattern)
    return lambda line: compiled.search(line) is not None


def _contains(fragment: str) -> LinePredicate:
    return lambda line: fragment in line


@dataclass(frozen=True)
class SuppressionRule:
    """Veto findings on lines accepted by ``predicate``.

    ``applies_to`` restricts the veto to rules whose name contains the given
    fragment; ``None`` applies it to every rule.
    """

    predicate: LinePredicate
    reason: str
    applies_to: Optional[str] = None

    def covers(self, rule: Rule) -> bool:
        return self.applies_to is None or self.applies_to in rule.name

    def vetoes(self, line: str, rule: Rule) -> bool:
        return self.covers(rule) and self.predicate(line)


class SuppressionPolicy:
    """Immutable, ordered list of suppression rules."""

    def __init__(self, rules: Iterable[SuppressionRule]) -> None:
        self._rules: Tuple[SuppressionRule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[SuppressionRule, ...]:
        return self._rules

    def is_suppressed(self, line: str, rule: Rule) -> bool:
        return self.reason_for(line, rule) is not None

    def reason_for(self, line: str, rule: Rule) -> Optional[str]:
        """Return the reason of the first suppression that vetoes ``rule`` on ``line``."""

        for suppression in self._rules:
            if suppression.vetoes(line, rule):
                return suppression.reason
        return None


def load_policy() -> SuppressionPolicy:
    return SuppressionPolicy(
        [
            SuppressionRule(_matches(r"process\.env\.[A-Z_]+"), "Environment variable usage"),
            SuppressionRule(
                _matches(r"os\.environ\[|os\.environ\.get\s*\(|os\.getenv\s*\("),
                "Environment variable usage",
            ),
            SuppressionRule(
                _matches(r"""(require\s*\(\s*|\bfrom\s+)['"](node:)?fs['"]"""),
                "Standard file system module",
            ),
            SuppressionRule(
                _matches(r"""(require\s*\(\s*|\bfrom\s+)['"](node:)?path['"]"""),
                "Standard path module",
            ),
            SuppressionRule(
                lambda line: ENV_ACCESS_PATTERN.search(line) is not None,
                "Value is read from the environment, not hardcoded",
                applies_to="Hardcoded",
            ),
            SuppressionRule(
                _contains("githubusercontent"),
                "GitHub raw content is generally safe",
                applies_to="Pipe to Shell",
            ),
        ]
    )
