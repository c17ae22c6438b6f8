"""Medium-severity rules: network access, dependencies and file deletion."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import List

from hardhat.severity import Severity

from . import PatternRule, Rule, RuleMetadata

JS_IMPORT_PATTERN = re.compile(
    r"""\brequire\s*\(\s*['"`][^'"`]+['"`]\s*\)"""
    r"""|^\s*import\s+(?:[\w*{}\s,$]+\s+from\s+)?['"][^'"]+['"]"""
    r"""|\bimport\s*\(\s*['"`][^'"`]+['"`]\s*\)"""
)
PY_FROM_IMPORT_PATTERN = re.compile(r"^\s*from\s+([\w.]+)\s+import\b")
PY_IMPORT_PATTERN = re.compile(
    r"^\s*import\s+([\w.]+(?:\s+as\s+\w+)?(?:\s*,\s*[\w.]+(?:\s+as\s+\w+)?)*)\s*(?:#.*)?$"
)


def _third_party(module: str) -> bool:
    top_level = module.split(".", 1)[0]
    # relative imports have an empty top-level name
    return bool(top_level) and top_level not in sys.stdlib_module_names


def _python_modules(line: str) -> List[str]:
    match = PY_FROM_IMPORT_PATTERN.match(line)
    if match:
        return [match.group(1)]
    match = PY_IMPORT_PATTERN.match(line)
    if match:
        return [part.split()[0] for part in match.group(1).split(",")]
    return []


@dataclass(frozen=True)
class DependencyImportRule:
    """Flag lines that pull in an npm or PyPI package.

    CommonJS ``require``, ES ``import`` statements and dynamic ``import()``
    match on any specifier. Python imports match only when the top-level
    module is not part of the standard library.
    """

    name: str = "External Dependency"
    severity: Severity = Severity.MEDIUM
    remediation: str = "Review the npm or PyPI package for security issues"

    def test(self, line: str) -> bool:
        if JS_IMPORT_PATTERN.search(line):
            return True
        return any(_third_party(module) for module in _python_modules(line))

    def describe(self) -> RuleMetadata:
        return RuleMetadata(name=self.name, severity=self.severity, remediation=self.remediation)


def get_rules() -> List[Rule]:
    return [
        PatternRule.compile(
            r"""\bfetch\s*\(\s*['"`][^'"`]+['"`]|\b(requests|httpx)\.(get|post|put|patch|delete|head|request)\s*\(|\burlopen\s*\(""",
            name="External Network Request",
            severity=Severity.MEDIUM,
            remediation="Verify URLs are legitimate and necessary",
        ),
        DependencyImportRule(),
        PatternRule.compile(
            r"\bfs\.(unlink|rmdir|rm)|\bos\.(remove|unlink)\s*\(|\bshutil\.rmtree\s*\(",
            name="File Deletion Operations",
            severity=Severity.MEDIUM,
            remediation="Ensure proper path validation",
        ),
    ]
