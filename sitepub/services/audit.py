"""Append-only audit log of publish runs.

The log is a CSV file with one row per invocation. Existing rows are never
rewritten; the header is only written when the file is new or empty.
Logs written before the Target and ReleaseNotes columns existed are read
with those fields left empty.
"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from ..core.model import LogResult, PublishLogEntry
from ..core.result import Err, Ok, Result
from .errors import FilesystemError

COLUMNS = ("Date", "Result", "Message", "Target", "ReleaseNotes")


def _row(entry: PublishLogEntry) -> dict[str, str]:
    return {
        "Date": entry.timestamp.isoformat(timespec="seconds"),
        "Result": str(entry.result),
        "Message": entry.message,
        "Target": entry.target_kind,
        "ReleaseNotes": entry.release_notes,
    }


def _entry(row: dict[str, str | None]) -> PublishLogEntry | None:
    raw_date = row.get("Date") or ""
    raw_result = row.get("Result") or ""
    try:
        timestamp = datetime.fromisoformat(raw_date)
        result = LogResult(raw_result)
    except ValueError:
        return None
    return PublishLogEntry(
        timestamp=timestamp,
        result=result,
        message=row.get("Message") or "",
        target_kind=row.get("Target") or "",
        release_notes=row.get("ReleaseNotes") or "",
    )


class AuditLog:
    def __init__(self, *, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def append(self, entry: PublishLogEntry) -> Result[None, FilesystemError]:
        """Append one row. Never raises."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            new_file = not self._path.exists() or self._path.stat().st_size == 0
            with self._path.open(
                "a", encoding="utf-8", errors="backslashreplace", newline=""
            ) as handle:
                writer = csv.DictWriter(handle, fieldnames=COLUMNS)
                if new_file:
                    writer.writeheader()
                writer.writerow(_row(entry))
        except (OSError, ValueError, csv.Error) as e:
            return Err(
                FilesystemError(action="append to audit log", path=self._path, reason=str(e))
            )
        return Ok(None)

    def read(self) -> Result[list[PublishLogEntry], FilesystemError]:
        """Return all parseable entries, oldest first."""
        try:
            with self._path.open("r", encoding="utf-8", newline="") as handle:
                rows = list(csv.DictReader(handle))
        except FileNotFoundError:
            return Ok([])
        except (OSError, UnicodeDecodeError) as e:
            return Err(FilesystemError(action="read audit log", path=self._path, reason=str(e)))

        entries: list[PublishLogEntry] = []
        for row in rows:
            entry = _entry(row)
            if entry is not None:
                entries.append(entry)
        return Ok(entries)
