"""Verdict classification and report rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .result import Finding, ScanStatistics, Summary, determine_verdict
from .rules import CATALOG_VERSION
from .severity import Verdict

VERDICT_GUIDANCE: Dict[Verdict, List[str]] = {
    Verdict.CLEAN: [
        "No threats detected. This skill appears safe to install.",
        "Remember: no scanner is perfect. Always review code yourself.",
    ],
    Verdict.BLOCKED: [
        "INSTALLATION BLOCKED",
        "Critical threats detected. DO NOT install this skill.",
        "If you believe this is a false positive:",
        "  1. Review the code manually",
        "  2. Check with the community",
        "  3. Report it to the OpenClaw security team",
    ],
    Verdict.HIGH_RISK: [
        "HIGH RISK",
        "Review carefully before installing.",
    ],
    Verdict.REVIEW_RECOMMENDED: [
        "REVIEW RECOMMENDED",
        "Medium-risk findings. Understand before installing.",
    ],
}


def sort_findings(findings: Iterable[Finding]) -> List[Finding]:
    """Order findings by severity; equal severities keep discovery order."""

    return sorted(findings, key=lambda finding: finding.severity.rank)


@dataclass
class Report:
    """Outcome of a scan ready for display or serialisation."""

    findings: List[Finding]
    statistics: ScanStatistics
    summary: Summary
    verdict: Verdict
    target: str = ""
    catalog_version: str = CATALOG_VERSION
    rendered: str = ""

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "target": self.target,
            "catalog_version": self.catalog_version,
            "statistics": self.statistics.to_dict(),
            "summary": self.summary.to_dict(),
            "verdict": self.verdict.value,
            "exit_code": self.exit_code,
            "passed": self.passed,
            "findings": [finding.to_dict() for finding in self.findings],
        }


def build_report(
    findings: Iterable[Finding],
    statistics: ScanStatistics,
    *,
    target: str = "",
    catalog_version: str = CATALOG_VERSION,
) -> Report:
    ordered = sort_findings(findings)
    report = Report(
        findings=ordered,
        statistics=statistics,
        summary=Summary.from_findings(ordered),
        verdict=determine_verdict(ordered),
        target=target,
        catalog_version=catalog_version,
    )
    report.rendered = format_report(report)
    return report


def format_finding(finding: Finding) -> List[str]:
    location = f"{finding.file}:{finding.line}" if finding.line else finding.file
    lines = [
        f"[{finding.severity.value}] {finding.issue}",
        f"  File: {location}",
    ]
    if finding.code:
        lines.append(f"  Code: {finding.code}")
    lines.append(f"  Fix : {finding.remediation}")
    return lines


def format_report(report: Report, title: Optional[str] = None) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    lines.append(title or "Hard Hat Scan Report")
    lines.append("=" * 40)
    if report.target:
        lines.append(f"Target        : {report.target}")
    lines.append(f"Files scanned : {report.statistics.files_scanned}")
    lines.append(f"Lines scanned : {report.statistics.lines_scanned:,}")
    lines.append("")
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in report.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    lines.append(f"Verdict   : {report.verdict.value}")
    lines.append(f"Findings  : {report.summary.total}")

    if report.findings:
        lines.append("")
        lines.append("Security Findings")
        lines.append("-" * 40)
        for finding in report.findings:
            lines.extend(format_finding(finding))
            lines.append("")
    else:
        lines.append("")

    lines.extend(VERDICT_GUIDANCE[report.verdict])
    return "\n".join(lines)
