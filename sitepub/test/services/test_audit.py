from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from sitepub.core.model import LogResult, PublishLogEntry
from sitepub.core.result import Err, Ok
from sitepub.services.audit import COLUMNS, AuditLog


def _entry(result: LogResult = LogResult.SUCCESS, notes: str = "") -> PublishLogEntry:
    return PublishLogEntry(
        timestamp=datetime(2026, 10, 17, 14, 30, 5),
        result=result,
        message="published live to https://app.example.com",
        target_kind="live",
        release_notes=notes,
    )


def _rows(path: Path) -> list[list[str]]:
    with path.open(encoding="utf-8", newline="") as handle:
        return list(csv.reader(handle))


def test_append_writes_header_once(tmp_path: Path) -> None:
    log = AuditLog(path=tmp_path / "publish-log.csv")

    assert log.append(_entry()) == Ok(None)
    assert log.append(_entry(LogResult.FAILED)) == Ok(None)

    rows = _rows(log.path)
    assert rows[0] == list(COLUMNS)
    assert len(rows) == 3
    assert rows[1][:2] == ["2026-10-17T14:30:05", "Success"]
    assert rows[2][1] == "Failed"


def test_append_never_rewrites_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "publish-log.csv"
    path.write_text("Date,Result,Message\n2025-01-01T00:00:00,Success,old run\n", encoding="utf-8")

    AuditLog(path=path).append(_entry())

    content = path.read_text(encoding="utf-8")
    assert content.startswith("Date,Result,Message\n2025-01-01T00:00:00,Success,old run\n")
    assert content.count("Date,") == 1


def test_read_round_trips_multiline_notes(tmp_path: Path) -> None:
    log = AuditLog(path=tmp_path / "publish-log.csv")
    entry = _entry(notes="Fixed login\nFaster search")
    log.append(entry)

    result = log.read()

    assert result == Ok([entry])


def test_read_accepts_three_column_logs(tmp_path: Path) -> None:
    path = tmp_path / "publish-log.csv"
    path.write_text(
        "Date,Result,Message\n"
        "2025-01-01T09:00:00,Failed,build did not return a success code of 0.\n",
        encoding="utf-8",
    )

    result = AuditLog(path=path).read()

    assert isinstance(result, Ok)
    [entry] = result.value
    assert entry.result == LogResult.FAILED
    assert entry.target_kind == ""
    assert entry.release_notes == ""


def test_read_missing_log_is_empty(tmp_path: Path) -> None:
    assert AuditLog(path=tmp_path / "none.csv").read() == Ok([])


def test_append_failure_is_returned_not_raised(tmp_path: Path) -> None:
    path = tmp_path / "publish-log.csv"
    path.mkdir()

    result = AuditLog(path=path).append(_entry())

    assert isinstance(result, Err)
    assert result.error.action == "append to audit log"


def test_append_survives_undecodable_file_names(tmp_path: Path) -> None:
    log = AuditLog(path=tmp_path / "publish-log.csv")
    entry = PublishLogEntry(
        timestamp=datetime(2026, 10, 17, 14, 30, 5),
        result=LogResult.FAILED,
        message="failed to clear site/caf\udce9.txt: in use",
        target_kind="live",
    )

    assert log.append(entry) == Ok(None)

    result = log.read()
    assert isinstance(result, Ok)
    [read_back] = result.value
    assert read_back.result == LogResult.FAILED
    assert read_back.message.startswith("failed to clear site/caf")
