"""Release notes consumed by exactly one publish run.

The operator drops free text into the notes file before publishing. The run
attaches it to its audit entry and then empties the file, whatever the
outcome, so the text never leaks into a later run's entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol
from ..platform.files import atomic_write_text
from .errors import FilesystemError


@dataclass(frozen=True, slots=True)
class ReleaseNotes:
    """Lines attached to the run's audit entry.

    `pending` is True whenever the source file held any bytes, even when they
    could not be decoded, so the file is still consumed by this run.
    """

    lines: tuple[str, ...] = ()
    pending: bool = False

    def __bool__(self) -> bool:
        return bool(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ReleaseNotesProvider:
    def __init__(self, *, path: Path, console: ConsoleProtocol) -> None:
        self._path = path
        self._console = console

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ReleaseNotes:
        """Read the notes file; a missing or unreadable file yields no notes."""
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ReleaseNotes()
        except UnicodeDecodeError as e:
            self._console.warning(f"ignoring undecodable release notes {self._path}: {e}")
            return ReleaseNotes(pending=True)
        except OSError as e:
            self._console.warning(f"ignoring unreadable release notes {self._path}: {e}")
            return ReleaseNotes(pending=self._has_bytes())

        if not content:
            return ReleaseNotes()
        return ReleaseNotes(lines=tuple(content.splitlines()), pending=True)

    def _has_bytes(self) -> bool:
        try:
            return self._path.is_file() and self._path.stat().st_size > 0
        except OSError:
            return False

    def clear(self) -> Result[None, FilesystemError]:
        """Empty the notes file in place (it is not deleted)."""
        try:
            atomic_write_text(self._path, "")
        except OSError as e:
            return Err(
                FilesystemError(action="clear release notes", path=self._path, reason=str(e))
            )
        return Ok(None)
