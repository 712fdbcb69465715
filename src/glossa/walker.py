"""Find Python source files under a root directory."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from glossa.extractor import UsedKey, extract_file
from glossa.logging import get_logger

log = get_logger(__name__)

SOURCE_SUFFIX = ".py"

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "__pycache__",
        "build",
        "dist",
        "_build",
        ".venv",
        "venv",
        "env",
        "node_modules",
        ".tox",
        ".nox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        ".eggs",
    }
)


def _passes_through_excluded(path: Path, root: Path, excluded: frozenset[str]) -> bool:
    """True if the symlink ``path`` resolves into an excluded directory.

    Only directories below the nearest common ancestor of the target and
    ``root`` are checked, so a project living under a directory that happens
    to be named ``build`` or ``env`` can still link to its siblings. A target
    inside a sibling directory with an excluded name (``../env/lib.py``) is
    skipped.
    """
    try:
        target = path.resolve(strict=True)
    except (OSError, RuntimeError):
        return True
    try:
        ancestor = Path(os.path.commonpath([target.parent, root.resolve()]))
    except ValueError:
        # different drives
        parts = target.parent.parts
    else:
        parts = target.parent.relative_to(ancestor).parts
    return any(part in excluded for part in parts)


def _log_walk_error(error: OSError) -> None:
    log.debug("directory skipped", path=error.filename, reason=error.strerror)


def iter_source_files(
    root: Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield every ``.py`` file at or below ``root``.

    Excluded directory names are pruned before descent and directory
    symlinks are never followed. Unreadable directories are skipped.
    """
    excluded = frozenset(exclude)

    if root.is_file():
        if root.suffix == SOURCE_SUFFIX:
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        base = Path(dirpath)
        for name in sorted(filenames):
            if not name.endswith(SOURCE_SUFFIX):
                continue
            path = base / name
            if path.is_symlink() and _passes_through_excluded(path, root, excluded):
                continue
            yield path


def collect_used_keys(
    root: Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> tuple[list[UsedKey], int]:
    """Extract keys from every source file under ``root``.

    Returns the records and the number of files visited.
    """
    records: list[UsedKey] = []
    files = 0
    for path in iter_source_files(root, exclude):
        files += 1
        records.extend(extract_file(path))
    log.debug("files scanned", root=str(root), files=files, used_keys=len(records))
    return records, files
