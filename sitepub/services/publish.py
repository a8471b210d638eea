"""Publish invocation against a queue or live directory."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol, Style
from ..platform.process import run_silent
from .errors import PublishFailure


class PublishInvoker:
    def __init__(
        self,
        *,
        command: Sequence[str],
        project_root: Path,
        console: ConsoleProtocol,
    ) -> None:
        self._command = tuple(command)
        self._project_root = project_root
        self._console = console

    def publish(self, directory: Path) -> Result[None, PublishFailure]:
        """Run the publish command with directory as its output path."""
        cmd = (*self._command, str(directory))
        self._console.header("Publish")
        self._console.print(" ".join(cmd), Style.DIM)

        result = run_silent(cmd, cwd=self._project_root).map_err(
            lambda e: PublishFailure(returncode=e.returncode, directory=directory, detail=e.reason)
        )
        if isinstance(result, Err):
            return result

        self._console.success(f"published to {directory}")
        return Ok(None)
