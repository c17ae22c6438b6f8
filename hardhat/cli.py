"""Command-line entry point for the Hard Hat scanner."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .config import HardHatConfig, home_dir, load_config
from .daily import run_daily_check
from .exceptions import HardHatError
from .report import Report, build_report
from .schedule import setup_daily_check
from .session import ScanSession
from .utils import configure_logging

EPILOG = """\
Exit codes:
  0 - no critical/high threats (clean or review recommended)
  1 - critical/high threats detected, or the scan could not run

Always review code manually even if the scan passes.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hardhat-scan",
        description="Safety scanner for OpenClaw skills. Run it before installing a skill.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--daily-check",
        action="store_true",
        help="Scan every installed skill (same as the daily-check command).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding the skills root, log directory and schedule.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeatable).",
    )
    subparsers = parser.add_subparsers(dest="command")

    scan_parser = subparsers.add_parser("scan", help="Scan a skill directory or file.")
    scan_parser.add_argument("path", help="Path to the skill to scan.")
    scan_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Console report format (defaults to text).",
    )
    scan_parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Path to write the structured JSON report (e.g., artifacts/scan.json).",
    )

    subparsers.add_parser("daily-check", help="Scan every installed skill under the skills root.")

    setup_parser = subparsers.add_parser(
        "setup-daily-check",
        help="Write the daily check script and scheduler configuration.",
    )
    setup_parser.add_argument(
        "--install-dir",
        default=".",
        help="Directory that receives daily-check.sh (defaults to the working directory).",
    )
    return parser


def write_output(report: Report, output_path: str | None, report_format: str) -> None:
    payload = json.dumps(report.to_dict(), indent=2)
    if report_format == "json":
        print(payload)
    else:
        print(report.rendered)

    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}", file=sys.stderr)


def run_scan(target: str, output_path: str | None = None, report_format: str = "text") -> int:
    session = ScanSession()
    result = session.run(Path(target).resolve())
    report = build_report(
        result.findings,
        result.statistics,
        target=result.target,
        catalog_version=session.catalog.version,
    )
    write_output(report, output_path, report_format)
    return report.exit_code


def run_daily(config: HardHatConfig) -> int:
    run_daily_check(config.skills_root)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    raw_args = sys.argv[1:] if argv is None else argv
    if not raw_args:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(raw_args)
    except SystemExit as exc:
        # argparse has already written help or the error message
        if exc.code:
            parser.print_help()
        return 0
    configure_logging(args.verbose)

    try:
        if args.daily_check or args.command == "daily-check":
            return run_daily(load_config(args.config))
        if args.command == "scan":
            return run_scan(args.path, args.output_path, args.format)
        if args.command == "setup-daily-check":
            setup_daily_check(load_config(args.config), Path(args.install_dir).resolve(), home_dir())
            return 0
    except HardHatError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
