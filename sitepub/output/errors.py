"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitepub.core.config import ConfigurationError
from sitepub.core.errors import ErrorCode
from sitepub.output.console import Style
from sitepub.services.errors import BuildFailure, FilesystemError, PublishError, PublishFailure

if TYPE_CHECKING:
    from sitepub.output.console import ConsoleProtocol

__all__ = ["print_publish_error", "publish_error_exit_code"]


def print_publish_error(error: PublishError, console: ConsoleProtocol) -> None:
    """Print a run failure to console with appropriate formatting."""
    match error:
        case ConfigurationError(message=message, path=path):
            console.error(message)
            if path is not None:
                console.print(f"config: {path}", Style.DIM)
        case BuildFailure(returncode=rc, detail=detail):
            console.error(f"{error.message} (exit {rc})")
            if detail:
                console.print(detail, Style.DIM)
        case FilesystemError():
            console.error(error.message)
        case PublishFailure(returncode=rc, directory=directory, detail=detail):
            console.error(f"{error.message} (exit {rc})")
            console.print(f"target: {directory}", Style.DIM)
            if detail:
                console.print(detail, Style.DIM)


def publish_error_exit_code(error: PublishError) -> int:
    """Get exit code for a run failure."""
    match error:
        case ConfigurationError():
            return int(ErrorCode.CONFIG_ERROR)
        case BuildFailure():
            return int(ErrorCode.BUILD_ERROR)
        case PublishFailure():
            return int(ErrorCode.PUBLISH_ERROR)
        case FilesystemError():
            return int(ErrorCode.IO_ERROR)
