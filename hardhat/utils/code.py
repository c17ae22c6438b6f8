"""Source tree enumeration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Collection, Generator, Optional


def is_excluded_dir(name: str, excluded_names: Collection[str]) -> bool:
    return name in excluded_names or name.startswith(".")


def iter_code_files(
    root: Path,
    extensions: Collection[str],
    excluded_dirs: Collection[str] = (),
    on_error: Optional[Callable[[OSError], None]] = None,
) -> Generator[Path, None, None]:
    """Yield files beneath ``root`` whose suffix is in ``extensions``.

    Traversal is depth-first in lexicographic order; a directory's files are
    yielded before its subdirectories are entered. Excluded and hidden
    directories are pruned, and directory symlinks are not followed.
    Directories that cannot be listed are reported to ``on_error``.
    """

    if root.is_file():
        if root.suffix.lower() in extensions:
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(name for name in dirnames if not is_excluded_dir(name, excluded_dirs))
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.suffix.lower() in extensions:
                yield path
