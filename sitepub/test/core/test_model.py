from __future__ import annotations

from pathlib import Path

from sitepub.core.model import LiveTarget, LogResult, QueueTarget


def test_target_kinds() -> None:
    assert QueueTarget(directory=Path("q")).kind == "queue"
    assert LiveTarget(directory=Path("l"), url="https://x").kind == "live"


def test_live_marker_path_is_inside_directory(tmp_path: Path) -> None:
    target = LiveTarget(directory=tmp_path, url="https://x", marker_name="offline.htm")
    assert target.marker_path == tmp_path / "offline.htm"


def test_live_defaults() -> None:
    target = LiveTarget(directory=Path("l"), url="https://x")
    assert target.marker_name == "app_offline.htm"
    assert target.grace_seconds == 5.0


def test_log_result_values() -> None:
    assert str(LogResult.SUCCESS) == "Success"
    assert str(LogResult.FAILED) == "Failed"
