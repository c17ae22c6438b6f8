"""High-severity rules: untrusted downloads, privilege escalation and shell access."""

from __future__ import annotations

import re
from typing import List

from hardhat.severity import Severity

from . import PatternRule, Rule

# Hosts whose binary/archive downloads are not reported.
TRUSTED_DOWNLOAD_HOSTS = (
    "github.com",
    "raw.githubusercontent",
    "npmjs",
    "nodejs",
    "pypi",
    "files.pythonhosted.org",
)
PAYLOAD_EXTENSIONS = ("zip", "exe", "bin", "dmg", "msi", "pkg", "tgz", r"tar\.gz", "deb", "rpm", "appimage")


def _untrusted_download_pattern() -> str:
    hosts = "|".join(re.escape(host) for host in TRUSTED_DOWNLOAD_HOSTS)
    extensions = "|".join(PAYLOAD_EXTENSIONS)
    return rf"https?://(?!{hosts})[^\s]+\.({extensions})\b"


def get_rules() -> List[Rule]:
    return [
        PatternRule.compile(
            _untrusted_download_pattern(),
            name="Download from Untrusted Source",
            severity=Severity.HIGH,
            remediation="Verify source is trustworthy before downloading",
            flags=re.IGNORECASE,
        ),
        PatternRule.compile(
            r"\b(sudo|doas)\s+",
            name="Requires Elevated Privileges",
            severity=Severity.HIGH,
            remediation="Review why sudo is needed. Prefer user-level installs.",
        ),
        PatternRule.compile(
            r"""(\brm\s+-(rf|fr)|\bdel\s+/f|\bformat\s*:)\s+["']?/""",
            name="Destructive File Operation",
            severity=Severity.HIGH,
            remediation="Verify paths are correct. Ensure backups exist.",
        ),
        PatternRule.compile(
            r"child_process|\bexec\s*\(|\bspawn\s*\(|\bsubprocess\b|\bos\.system\s*\(|\bos\.popen\s*\(",
            name="System Command Execution",
            severity=Severity.HIGH,
            remediation="Review all system calls. Ensure input sanitization.",
        ),
    ]
