"""Publish targets and audit records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import Literal

__all__ = [
    "LiveTarget",
    "LogResult",
    "PublishLogEntry",
    "PublishTarget",
    "QueueTarget",
    "TargetKind",
]

TargetKind = Literal["queue", "live"]


@dataclass(frozen=True, slots=True)
class QueueTarget:
    """Staging directory picked up later by an external deployment agent."""

    directory: Path

    @property
    def kind(self) -> TargetKind:
        return "queue"


@dataclass(frozen=True, slots=True)
class LiveTarget:
    """Directory serving production traffic.

    Attributes:
        directory: Root of the served application.
        url: Public address opened after a successful publish.
        marker_name: File name of the maintenance marker inside directory.
        grace_seconds: Wait between creating the marker and clearing files.
    """

    directory: Path
    url: str
    marker_name: str = "app_offline.htm"
    grace_seconds: float = 5.0

    @property
    def kind(self) -> TargetKind:
        return "live"

    @property
    def marker_path(self) -> Path:
        return self.directory / self.marker_name


PublishTarget = QueueTarget | LiveTarget


class LogResult(StrEnum):
    SUCCESS = "Success"
    FAILED = "Failed"


@dataclass(frozen=True, slots=True)
class PublishLogEntry:
    """One row of the audit log."""

    timestamp: datetime
    result: LogResult
    message: str
    target_kind: str
    release_notes: str = ""
