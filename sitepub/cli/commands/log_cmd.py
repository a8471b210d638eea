"""Log command - show recent entries of the audit log."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from sitepub.cli.commands._helpers import config_option, exit_on_error
from sitepub.cli.context import build_context
from sitepub.core.model import LogResult, PublishLogEntry
from sitepub.core.result import Err
from sitepub.services.audit import AuditLog

_console = Console()


def render_entries(entries: list[PublishLogEntry]) -> Table:
    table = Table(show_lines=False)
    table.add_column("Date", style="dim", no_wrap=True)
    table.add_column("Result")
    table.add_column("Target")
    table.add_column("Message")
    table.add_column("Release notes", style="dim")

    for entry in entries:
        color = "green" if entry.result == LogResult.SUCCESS else "red"
        table.add_row(
            f"{entry.timestamp:%Y-%m-%d %H:%M:%S}",
            f"[{color}]{entry.result}[/{color}]",
            Text(entry.target_kind or "-"),
            Text(entry.message),
            Text(entry.release_notes),
        )
    return table


def log(
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of entries to show"),
    config: Path | None = config_option(),
) -> None:
    """Show the most recent publish runs."""
    ctx = build_context(config)
    entries = AuditLog(path=ctx.config.audit_log_path).read()
    if isinstance(entries, Err):
        exit_on_error(entries.error, ctx.console)

    if not entries.value:
        _console.print("[dim]No runs recorded[/dim]")
        return

    _console.print(render_entries(entries.value[-limit:]))
