from hardhat.rules import load_catalog
from hardhat.suppression import load_policy


def _rule(name):
    return next(rule for rule in load_catalog().all_rules() if rule.name == name)


def test_env_reference_suppresses_hardcoded_token():
    line = 'const token = process.env.TOKEN || "5123456789:AAHdqTcvCH1vGWJxfSeofSAs0K5PALDsaw";'

    assert load_policy().is_suppressed(line, _rule("Hardcoded Telegram Bot Token"))


def test_env_heuristic_only_applies_to_hardcoded_rules():
    policy = load_policy()
    line = "eval(atob(process.env['PAYLOAD']))"

    assert not policy.is_suppressed(line, _rule("Code Obfuscation (eval + decode)"))
    assert policy.reason_for(
        "key = process.env['X'] || 'sk-" + "a" * 48 + "'", _rule("Hardcoded OpenAI API Key")
    ) == "Value is read from the environment, not hardcoded"


def test_python_environment_lookup_is_safe():
    line = 'token = os.environ.get("TOKEN", "5123456789:AAHdqTcvCH1vGWJxfSeofSAs0K5PALDsaw")'

    assert load_policy().is_suppressed(line, _rule("Hardcoded Telegram Bot Token"))


def test_trusted_host_suppresses_pipe_to_shell_only():
    policy = load_policy()
    line = "curl https://raw.githubusercontent.com/x/y/install.sh | sudo bash"

    assert policy.is_suppressed(line, _rule("Pipe to Shell Pattern"))
    assert not policy.is_suppressed(line, _rule("Requires Elevated Privileges"))


def test_standard_modules_are_safe():
    policy = load_policy()

    assert policy.is_suppressed("const fs = require('fs');", _rule("External Dependency"))
    assert policy.is_suppressed('const path = require("path");', _rule("External Dependency"))
    assert not policy.is_suppressed("const axios = require('axios');", _rule("External Dependency"))


def test_standard_module_es_imports_are_safe():
    policy = load_policy()

    assert policy.is_suppressed("import fs from 'fs';", _rule("External Dependency"))
    assert policy.is_suppressed('import { join } from "node:path";', _rule("External Dependency"))
    assert not policy.is_suppressed("import axios from 'axios';", _rule("External Dependency"))


def test_policy_is_fixed_after_construction():
    policy = load_policy()

    assert isinstance(policy.rules, tuple)
    assert len(policy.rules) == 6
