"""Filesystem helpers."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path

__all__ = ["atomic_write_text", "clear_directory"]


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def _remove_readonly(_func: Callable[[str], object], path: str, exc: BaseException) -> None:
    """Handle read-only files on Windows (e.g. files copied from a share)."""
    if isinstance(exc, PermissionError):
        os.chmod(path, stat.S_IWRITE)
        os.unlink(path)
    else:
        raise exc


def clear_directory(directory: Path, *, keep: frozenset[str] = frozenset()) -> list[Path]:
    """Remove every entry directly under directory except names in keep.

    Kept entries are never touched, so a crash mid-clear cannot remove them.
    The directory is created if it does not exist yet.

    Returns:
        The removed top-level entries, in the order they were removed.

    Raises:
        OSError: If an entry cannot be removed.
    """
    directory.mkdir(parents=True, exist_ok=True)

    removed: list[Path] = []
    for entry in sorted(directory.iterdir()):
        if entry.name in keep:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry, onexc=_remove_readonly)
        else:
            try:
                entry.unlink()
            except PermissionError:
                os.chmod(entry, stat.S_IWRITE)
                entry.unlink()
        removed.append(entry)
    return removed
