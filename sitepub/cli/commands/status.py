"""Status command - show targets and whether the live site is in maintenance mode."""

from __future__ import annotations

from pathlib import Path

from sitepub.cli.commands._helpers import config_option, exit_on_error
from sitepub.cli.context import build_context
from sitepub.core.model import LogResult
from sitepub.core.result import Err
from sitepub.output.console import Style
from sitepub.services.audit import AuditLog


def status(config: Path | None = config_option()) -> None:
    """Show configured targets and the last publish run."""
    ctx = build_context(config)
    cfg = ctx.config
    console = ctx.console

    console.header("Targets")
    if cfg.queue is not None:
        console.print(f"queue: {cfg.queue.directory}")
    else:
        console.print("queue: not configured", Style.DIM)

    if cfg.live is None:
        console.print("live:  not configured", Style.DIM)
    else:
        console.print(f"live:  {cfg.live.directory} ({cfg.live.url})")
        if cfg.live.marker_path.exists():
            console.warning(f"maintenance mode: {cfg.live.marker_path} is present")
        else:
            console.success("serving (no maintenance marker)")

    entries = AuditLog(path=cfg.audit_log_path).read()
    if isinstance(entries, Err):
        exit_on_error(entries.error, console)

    console.header("Last run")
    if not entries.value:
        console.print("no runs recorded", Style.DIM)
        return

    last = entries.value[-1]
    style = Style.SUCCESS if last.result == LogResult.SUCCESS else Style.ERROR
    console.print(f"{last.timestamp:%Y-%m-%d %H:%M:%S}  {last.result}  {last.target_kind}", style)
    console.print(last.message, Style.DIM)
