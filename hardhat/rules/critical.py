"""Critical rules: hardcoded credentials, obfuscation and known malware."""

from __future__ import annotations

import re
from typing import List

from hardhat.severity import Severity

from . import PatternRule, Rule

MOVE_TO_ENV = "Move the secret to a .env file and read it from the environment at runtime"


def get_rules() -> List[Rule]:
    return [
        PatternRule.compile(
            r"""['"]\d{9,10}:[A-Za-z0-9_-]{34,}['"]""",
            name="Hardcoded Telegram Bot Token",
            severity=Severity.CRITICAL,
            remediation="Move token to .env file, use process.env.TELEGRAM_BOT_TOKEN",
        ),
        PatternRule.compile(
            r"""['"]gh[pousr]_[A-Za-z0-9]{36,}['"]""",
            name="Hardcoded GitHub Token",
            severity=Severity.CRITICAL,
            remediation=MOVE_TO_ENV,
        ),
        PatternRule.compile(
            r"""['"]sk-[A-Za-z0-9]{48}['"]""",
            name="Hardcoded OpenAI API Key",
            severity=Severity.CRITICAL,
            remediation=MOVE_TO_ENV,
        ),
        PatternRule.compile(
            r"\b(eval|exec)\s*\(\s*(atob|Buffer\.from|decodeURIComponent|base64\.b64decode|codecs\.decode|bytes\.fromhex)",
            name="Code Obfuscation (eval + decode)",
            severity=Severity.CRITICAL,
            remediation="Remove obfuscation - code should be readable",
            flags=re.IGNORECASE,
        ),
        PatternRule.compile(
            r"""["']openclaw-core["']""",
            name="Known Malicious Dependency (openclaw-core)",
            severity=Severity.CRITICAL,
            remediation="DO NOT INSTALL - This is malware",
        ),
        PatternRule.compile(
            r"\b(curl|wget)\b.+\|.*\b(bash|sh|zsh)\s*$",
            name="Pipe to Shell Pattern",
            severity=Severity.CRITICAL,
            remediation="Review script before executing. Download and inspect first.",
            flags=re.IGNORECASE,
        ),
    ]
