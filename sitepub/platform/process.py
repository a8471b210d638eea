"""Running external toolchain commands.

Build and publish commands are opaque: only the exit status counts. stdout
is discarded; stderr stays attached to the terminal so compiler diagnostics
still reach the operator.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from sitepub.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that exited non-zero or never started.

    Attributes:
        command: argv as executed.
        returncode: Exit status, or -1 when the process could not be spawned.
        reason: Spawn error text; empty when the process ran.
    """

    command: tuple[str, ...]
    returncode: int
    reason: str = ""

    def __str__(self) -> str:
        shown = " ".join(self.command[:3])
        if len(self.command) > 3:
            shown += " ..."
        return f"{shown} failed (exit {self.returncode})"


def run_silent(
    cmd: Sequence[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Run cmd in cwd and wait for it. Ok(None) means exit status 0."""
    argv = tuple(cmd)
    try:
        completed = subprocess.run(
            argv,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            stdout=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=argv, returncode=-1, reason=str(e)))

    if completed.returncode == 0:
        return Ok(None)
    return Err(ProcessError(command=argv, returncode=completed.returncode))
