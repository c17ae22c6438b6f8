"""Scan session: walk a target, match every line and collect findings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Optional

from .exceptions import PathNotFound
from .matcher import LineMatcher
from .result import Finding, ScanResult
from .rules import RuleCatalog, load_catalog
from .severity import Severity
from .suppression import SuppressionPolicy, load_policy
from .utils import iter_code_files, read_text_file

logger = logging.getLogger(__name__)

CODE_EXTENSIONS = frozenset({".js", ".ts", ".py", ".sh", ".bash", ".json", ".md"})
EXCLUDED_DIRS = frozenset({"node_modules"})

READ_FAILURE_REMEDIATION = "Check file permissions"


class ScanSession:
    """Run one scan over a target path.

    The catalog and suppression policy are shared, read-only inputs; every
    accumulator lives on the ``ScanResult`` returned by :meth:`run`, so
    independent sessions may safely reuse the same catalog and policy.
    """

    def __init__(
        self,
        catalog: Optional[RuleCatalog] = None,
        policy: Optional[SuppressionPolicy] = None,
        *,
        extensions: Collection[str] = CODE_EXTENSIONS,
        excluded_dirs: Collection[str] = EXCLUDED_DIRS,
    ) -> None:
        self.catalog = catalog or load_catalog()
        self.policy = policy or load_policy()
        self.matcher = LineMatcher(self.catalog, self.policy)
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.excluded_dirs = frozenset(excluded_dirs)

    def run(self, root_path: str | Path) -> ScanResult:
        root = Path(root_path)
        if not root.exists():
            raise PathNotFound(root)

        logger.info("Scanning %s (rule catalog %s)", root, self.catalog.version)
        result = ScanResult(target=str(root))

        def on_walk_error(exc: OSError) -> None:
            self._record_unreadable_dir(root, exc, result)

        for path in iter_code_files(root, self.extensions, self.excluded_dirs, on_error=on_walk_error):
            self._scan_file(root, path, result)

        logger.info(
            "Finished %s: %d file(s), %d line(s), %d finding(s)",
            root,
            result.statistics.files_scanned,
            result.statistics.lines_scanned,
            len(result.findings),
        )
        return result

    def _scan_file(self, root: Path, path: Path, result: ScanResult) -> None:
        relative = self._relative_path(root, path)
        result.statistics.add_file()
        try:
            content = read_text_file(path)
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            result.add_finding(
                Finding(
                    severity=Severity.WARNING,
                    file=relative,
                    line=0,
                    issue=f"Could not read file: {exc}",
                    remediation=READ_FAILURE_REMEDIATION,
                )
            )
            return

        lines = content.split("\n")
        result.statistics.add_lines(len(lines))
        logger.debug("Processing %s (%d line(s))", relative, len(lines))
        for line_number, line in enumerate(lines, start=1):
            result.extend(self.matcher.match_line(line, relative, line_number))

    def _record_unreadable_dir(self, root: Path, exc: OSError, result: ScanResult) -> None:
        directory = Path(exc.filename) if exc.filename else root
        logger.warning("Could not read directory %s: %s", directory, exc)
        result.add_finding(
            Finding(
                severity=Severity.WARNING,
                file=self._relative_path(root, directory),
                line=0,
                issue=f"Could not read directory: {exc}",
                remediation=READ_FAILURE_REMEDIATION,
            )
        )

    @staticmethod
    def _relative_path(root: Path, path: Path) -> str:
        if root.is_file():
            return path.name
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            return str(path)
