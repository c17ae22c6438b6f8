"""Apply the rule catalog to individual lines of text."""

from __future__ import annotations

import logging
from typing import List

from .result import Finding, make_excerpt
from .rules import RuleCatalog
from .suppression import SuppressionPolicy

logger = logging.getLogger(__name__)


class LineMatcher:
    """Match one line against every catalog rule, honouring suppressions."""

    def __init__(self, catalog: RuleCatalog, policy: SuppressionPolicy) -> None:
        self.catalog = catalog
        self.policy = policy

    def match_line(self, line: str, file: str, line_number: int) -> List[Finding]:
        findings: List[Finding] = []
        for rule in self.catalog.all_rules():
            if not rule.test(line):
                continue
            reason = self.policy.reason_for(line, rule)
            if reason is not None:
                logger.debug("Suppressed %s at %s:%d (%s)", rule.name, file, line_number, reason)
                continue
            meta = rule.describe()
            findings.append(
                Finding(
                    severity=meta.severity,
                    file=file,
                    line=line_number,
                    issue=meta.name,
                    remediation=meta.remediation,
                    code=make_excerpt(line),
                )
            )
        return findings
