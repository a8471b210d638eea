"""Maintenance window for a live target.

The live directory moves through

    Serving -> Offline (marker present) -> Cleared -> Republished -> Serving

The marker file is the whole protocol with the web host: while it exists
the host serves it instead of the application. It is created before any
file is removed and only removed by `bring_online`, which the orchestrator
calls on the success path alone. Every failure leaves the marker in place,
so the site stays in maintenance mode rather than serving a half-swapped
directory.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from ..core.model import LiveTarget
from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol, Style
from ..platform.files import atomic_write_text, clear_directory
from .errors import FilesystemError

MARKER_CONTENT = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head><title>Down for maintenance</title></head>\n"
    "<body><h1>We are updating the site.</h1><p>Please check back in a few minutes.</p></body>\n"
    "</html>\n"
)


class MaintenanceWindow:
    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._console = console
        self._sleep = sleep

    def take_offline(self, target: LiveTarget) -> Result[bool, FilesystemError]:
        """Ensure the marker exists.

        Returns:
            Ok(True) if the marker was created, Ok(False) if a marker left
            by an earlier run was reused.
        """
        self._console.header("Maintenance window")
        marker = target.marker_path
        if marker.exists():
            self._console.info(f"maintenance marker already present, reusing {marker}")
            return Ok(False)

        try:
            atomic_write_text(marker, MARKER_CONTENT)
        except OSError as e:
            return Err(FilesystemError(action="create marker", path=marker, reason=str(e)))

        self._console.success(f"site offline: {marker}")
        return Ok(True)

    def wait_for_host(self, target: LiveTarget) -> None:
        """Give the host time to notice the marker before files disappear."""
        if target.grace_seconds <= 0:
            return
        self._console.print(
            f"waiting {target.grace_seconds:g}s for the host to pick up the marker", Style.DIM
        )
        self._sleep(target.grace_seconds)

    def clear(self, target: LiveTarget) -> Result[int, FilesystemError]:
        """Remove everything under the live directory except the marker."""
        try:
            removed = clear_directory(target.directory, keep=frozenset({target.marker_name}))
        except OSError as e:
            return Err(FilesystemError(action="clear", path=target.directory, reason=str(e)))

        self._console.print(f"removed {len(removed)} entries from {target.directory}", Style.DIM)
        return Ok(len(removed))

    def bring_online(self, target: LiveTarget) -> Result[None, FilesystemError]:
        """Remove the marker. Only valid after a successful publish."""
        marker = target.marker_path
        try:
            marker.unlink(missing_ok=True)
        except OSError as e:
            return Err(FilesystemError(action="remove marker", path=marker, reason=str(e)))

        self._console.success(f"site online: {target.url}")
        return Ok(None)
