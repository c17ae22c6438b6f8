"""Companion setup for periodic daily checks.

Writes a ``daily-check.sh`` wrapper that logs one dated file per run and, on
macOS, a launchd agent that runs it at the configured time. Other platforms
get printed cron or Task Scheduler instructions instead.
"""

from __future__ import annotations

import logging
import plistlib
import shlex
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from .config import HardHatConfig

logger = logging.getLogger(__name__)

LAUNCHD_LABEL = "com.openclaw.hardhat.dailycheck"
SCRIPT_NAME = "daily-check.sh"
LOG_RETENTION_DAYS = 30

DAILY_SCRIPT_TEMPLATE = """#!/bin/bash
# OpenClaw Hard Hat - Daily Security Check
# Generated: {generated}

LOG_DIR={log_dir}
DATE=$(date +%Y-%m-%d)
LOG_FILE="$LOG_DIR/daily-check-$DATE.log"

mkdir -p "$LOG_DIR"
echo "========================================" >> "$LOG_FILE"
echo "Daily Security Check - $DATE" >> "$LOG_FILE"
echo "========================================" >> "$LOG_FILE"
echo "" >> "$LOG_FILE"

{python} -m hardhat --daily-check >> "$LOG_FILE" 2>&1

echo "" >> "$LOG_FILE"
echo "Completed: $(date)" >> "$LOG_FILE"
echo "" >> "$LOG_FILE"

# Keep only the last {retention} days of logs
find "$LOG_DIR" -name "daily-check-*.log" -mtime +{retention} -delete
"""


def render_daily_script(log_dir: Path, python: str, generated: Optional[datetime] = None) -> str:
    stamp = (generated or datetime.now(timezone.utc)).isoformat()
    return DAILY_SCRIPT_TEMPLATE.format(
        generated=stamp,
        log_dir=shlex.quote(str(log_dir)),
        python=shlex.quote(python),
        retention=LOG_RETENTION_DAYS,
    )


def write_daily_script(install_dir: Path, log_dir: Path, python: str = sys.executable) -> Path:
    install_dir.mkdir(parents=True, exist_ok=True)
    script_path = install_dir / SCRIPT_NAME
    script_path.write_text(render_daily_script(log_dir, python), encoding="utf-8")
    script_path.chmod(0o755)
    logger.info("Wrote %s", script_path)
    return script_path


def render_launchd_plist(script_path: Path, log_dir: Path, hour: int, minute: int) -> bytes:
    payload = {
        "Label": LAUNCHD_LABEL,
        "ProgramArguments": [str(script_path)],
        "StartCalendarInterval": {"Hour": hour, "Minute": minute},
        "StandardOutPath": str(log_dir / "launchd-out.log"),
        "StandardErrorPath": str(log_dir / "launchd-err.log"),
    }
    return plistlib.dumps(payload)


def launchd_plist_path(home: Path) -> Path:
    return home / "Library" / "LaunchAgents" / f"{LAUNCHD_LABEL}.plist"


def cron_line(script_path: Path, hour: int, minute: int) -> str:
    return f"{minute} {hour} * * * {script_path}"


def setup_daily_check(
    config: HardHatConfig,
    install_dir: Path,
    home: Path,
    platform: str = sys.platform,
    python: str = sys.executable,
    emit: Callable[[str], None] = print,
) -> List[Path]:
    """Create the scheduling artifacts and print activation steps.

    Returns the paths written.
    """

    config.log_dir.mkdir(parents=True, exist_ok=True)
    script_path = write_daily_script(install_dir, config.log_dir, python)
    written = [script_path]
    emit(f"Created {script_path}")
    emit("")
    emit("Schedule options:")

    hour, minute = config.schedule_hour, config.schedule_minute
    if platform == "darwin":
        plist_path = launchd_plist_path(home)
        plist_path.parent.mkdir(parents=True, exist_ok=True)
        plist_path.write_bytes(render_launchd_plist(script_path, config.log_dir, hour, minute))
        written.append(plist_path)
        logger.info("Wrote %s", plist_path)
        emit(f"macOS (launchd): created {plist_path}")
        emit(f"  Activate with: launchctl load {plist_path}")
        emit("macOS (cron): add this line with `crontab -e`:")
        emit(f"  {cron_line(script_path, hour, minute)}")
    elif platform.startswith("linux"):
        emit("Linux (cron): add this line with `crontab -e`:")
        emit(f"  {cron_line(script_path, hour, minute)}")
    else:
        emit("Windows (Task Scheduler):")
        emit("  1. Open Task Scheduler and choose Create Basic Task")
        emit('  2. Name: "OpenClaw Hard Hat Daily Check"')
        emit(f"  3. Trigger: Daily at {hour:02d}:{minute:02d}")
        emit(f"  4. Action: Start a program: {python}")
        emit("     Arguments: -m hardhat --daily-check")

    emit("")
    emit(f"Logs will be saved to: {config.log_dir}")
    emit(f"To run a check now: {script_path}")
    return written
