import os
import plistlib
from pathlib import Path

from hardhat.config import HardHatConfig
from hardhat.schedule import (
    LAUNCHD_LABEL,
    cron_line,
    render_launchd_plist,
    setup_daily_check,
    write_daily_script,
)


def _config(tmp_path):
    return HardHatConfig(skills_root=tmp_path / "skills", log_dir=tmp_path / "logs", schedule_hour=7, schedule_minute=30)


def test_daily_script_runs_daily_check(tmp_path):
    script = write_daily_script(tmp_path / "bin", tmp_path / "logs", python="/usr/bin/python3")

    content = script.read_text(encoding="utf-8")
    assert content.startswith("#!/bin/bash")
    assert "/usr/bin/python3 -m hardhat --daily-check" in content
    assert 'LOG_FILE="$LOG_DIR/daily-check-$DATE.log"' in content
    assert "-mtime +30 -delete" in content
    assert os.access(script, os.X_OK)


def test_launchd_plist_schedules_script(tmp_path):
    script = tmp_path / "daily-check.sh"

    payload = plistlib.loads(render_launchd_plist(script, tmp_path / "logs", 9, 0))

    assert payload["Label"] == LAUNCHD_LABEL
    assert payload["ProgramArguments"] == [str(script)]
    assert payload["StartCalendarInterval"] == {"Hour": 9, "Minute": 0}


def test_cron_line_uses_configured_time():
    assert cron_line(Path("/opt/daily-check.sh"), 9, 0) == "0 9 * * * /opt/daily-check.sh"


def test_setup_on_macos_writes_launch_agent(tmp_path):
    lines = []
    home = tmp_path / "home"

    written = setup_daily_check(_config(tmp_path), tmp_path / "install", home, platform="darwin", emit=lines.append)

    plist_path = home / "Library" / "LaunchAgents" / f"{LAUNCHD_LABEL}.plist"
    assert written == [tmp_path / "install" / "daily-check.sh", plist_path]
    assert plistlib.loads(plist_path.read_bytes())["StartCalendarInterval"] == {"Hour": 7, "Minute": 30}
    assert any("launchctl load" in line for line in lines)
    assert (tmp_path / "logs").is_dir()


def test_setup_on_linux_prints_cron_entry(tmp_path):
    lines = []

    written = setup_daily_check(_config(tmp_path), tmp_path / "install", tmp_path / "home", platform="linux", emit=lines.append)

    assert len(written) == 1
    assert any(line.strip().startswith("30 7 * * *") for line in lines)
    assert not (tmp_path / "home" / "Library").exists()


def test_setup_on_windows_describes_task_scheduler(tmp_path):
    lines = []

    setup_daily_check(_config(tmp_path), tmp_path / "install", tmp_path / "home", platform="win32", python="python.exe", emit=lines.append)

    assert "Windows (Task Scheduler):" in lines
    assert "     Arguments: -m hardhat --daily-check" in lines
