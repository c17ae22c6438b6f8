"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List, Optional, Tuple

from .severity import Severity, Verdict

EXCERPT_LIMIT = 80


def make_excerpt(line: str) -> str:
    """Return the trimmed line text clipped to ``EXCERPT_LIMIT`` characters."""

    return line.strip()[:EXCERPT_LIMIT]


@dataclass(frozen=True)
class Finding:
    """Capture a single detected issue at a file/line."""

    severity: Severity
    file: str
    line: int
    issue: str
    remediation: str
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class ScanStatistics:
    """Running file and line counters for one scan session."""

    files_scanned: int = 0
    lines_scanned: int = 0

    def add_file(self) -> None:
        self.files_scanned += 1

    def add_lines(self, count: int) -> None:
        if count < 0:
            raise ValueError("line count must not be negative")
        self.lines_scanned += count

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    critical: int = 0
    high: int = 0
    medium: int = 0
    warning: int = 0

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "Summary":
        summary = cls()
        for finding in findings:
            summary.increment(finding.severity)
        return summary

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def count(self, severity: Severity) -> int:
        return getattr(self, severity.value.lower())

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, self.count(severity)) for severity in Severity]

    @property
    def total(self) -> int:
        return sum(self.count(severity) for severity in Severity)


def determine_verdict(findings: Iterable[Finding]) -> Verdict:
    """Classify a finding set by its most severe member."""

    summary = Summary.from_findings(findings)
    if summary.total == 0:
        return Verdict.CLEAN
    if summary.critical > 0:
        return Verdict.BLOCKED
    if summary.high > 0:
        return Verdict.HIGH_RISK
    return Verdict.REVIEW_RECOMMENDED


@dataclass
class ScanResult:
    """Bundle the findings and statistics gathered by one scan session."""

    target: str = ""
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    findings: List[Finding] = field(default_factory=list)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.add_finding(finding)

    @property
    def summary(self) -> Summary:
        return Summary.from_findings(self.findings)

    @property
    def verdict(self) -> Verdict:
        return determine_verdict(self.findings)
