from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sitepub.core.config import ConfigurationError

__all__ = [
    "BuildFailure",
    "ConfigurationError",
    "FilesystemError",
    "PublishError",
    "PublishFailure",
]


@dataclass(frozen=True, slots=True)
class BuildFailure:
    returncode: int
    detail: str = ""

    @property
    def message(self) -> str:
        return "build did not return a success code of 0."


@dataclass(frozen=True, slots=True)
class FilesystemError:
    action: str
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"failed to {self.action} {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class PublishFailure:
    returncode: int
    directory: Path
    detail: str = ""

    @property
    def message(self) -> str:
        return "publish did not return a success code of 0."


PublishError = ConfigurationError | BuildFailure | FilesystemError | PublishFailure
