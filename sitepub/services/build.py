"""Build verification.

The build gates every destructive step: nothing under a target directory is
touched until the build command has exited with status 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol, Style
from ..platform.process import run_silent
from .errors import BuildFailure


class BuildVerifier:
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

    def verify(self) -> Result[None, BuildFailure]:
        """Run the build command once; no retries."""
        self._console.header("Build")
        self._console.print(" ".join(self._command), Style.DIM)

        result = run_silent(self._command, cwd=self._project_root).map_err(
            lambda e: BuildFailure(returncode=e.returncode, detail=e.reason)
        )
        if isinstance(result, Err):
            return result

        self._console.success("build succeeded")
        return Ok(None)
