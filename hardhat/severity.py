"""Severity and verdict definitions for scan findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for findings.

    Members are declared in reporting order: CRITICAL sorts first and
    WARNING (operational notices such as unreadable files) sorts last.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    WARNING = "WARNING"

    @property
    def rank(self) -> int:
        """Return the sort position; lower values are reported first."""

        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {severity: idx for idx, severity in enumerate(Severity)}

# Tiers that hold detection rules; WARNING is reserved for operational notices.
RULE_TIERS = (Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM)


class Verdict(str, Enum):
    """Overall outcome of a scan, ordered from least to most severe."""

    CLEAN = "CLEAN"
    REVIEW_RECOMMENDED = "REVIEW_RECOMMENDED"
    HIGH_RISK = "HIGH_RISK"
    BLOCKED = "BLOCKED"

    @property
    def rank(self) -> int:
        return _VERDICT_RANKS[self]

    @property
    def exit_code(self) -> int:
        """Return the process exit code that drives install gating."""

        if self in (Verdict.BLOCKED, Verdict.HIGH_RISK):
            return 1
        return 0


_VERDICT_RANKS = {verdict: idx for idx, verdict in enumerate(Verdict)}
