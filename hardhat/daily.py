"""Daily check: scan every installed skill under the skills root."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .report import Report, build_report
from .session import ScanSession

logger = logging.getLogger(__name__)


@dataclass
class SkillCheck:
    """Report for one installed skill."""

    name: str
    path: Path
    report: Report


def iter_skill_dirs(skills_root: Path) -> List[Path]:
    """Return the non-hidden subdirectories of ``skills_root`` in name order."""

    if not skills_root.is_dir():
        logger.info("Skills root %s not found; nothing to check", skills_root)
        return []
    return sorted(
        (entry for entry in skills_root.iterdir() if entry.is_dir() and not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


def run_daily_check(
    skills_root: Path,
    session: Optional[ScanSession] = None,
    emit: Callable[[str], None] = print,
) -> List[SkillCheck]:
    """Scan each skill independently and emit a banner plus report per skill."""

    session = session or ScanSession()
    checks: List[SkillCheck] = []
    emit("Running daily security check...")
    for skill_dir in iter_skill_dirs(skills_root):
        emit(f"\n--- Checking: {skill_dir.name} ---")
        logger.info("Daily check of %s", skill_dir)
        result = session.run(skill_dir)
        report = build_report(
            result.findings,
            result.statistics,
            target=result.target,
            catalog_version=session.catalog.version,
        )
        emit(report.rendered)
        checks.append(SkillCheck(name=skill_dir.name, path=skill_dir, report=report))
    emit(f"\nSkills checked: {len(checks)}")
    return checks
