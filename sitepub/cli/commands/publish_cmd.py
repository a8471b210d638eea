"""Publish command - build and swap the application into a target."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

import typer

from sitepub.cli.commands._helpers import config_option, exit_on_error
from sitepub.cli.context import build_context
from sitepub.cli.selector import confirm_live, select_target
from sitepub.core.config import PublishConfig, validate_for
from sitepub.core.errors import ErrorCode
from sitepub.core.model import LiveTarget, PublishTarget
from sitepub.core.result import Err, Ok
from sitepub.output.console import ConsoleProtocol
from sitepub.services.orchestrator import PublishOrchestrator


class Target(StrEnum):
    queue = "queue"
    live = "live"


def open_in_browser(url: str) -> None:
    typer.launch(url)


def _choose_target(
    config: PublishConfig,
    *,
    target: Target | None,
    yes: bool,
    console: ConsoleProtocol,
) -> PublishTarget:
    if target is None:
        return select_target(config=config, console=console)

    if target == Target.queue:
        assert config.queue is not None
        return config.queue

    assert config.live is not None
    if not yes and not confirm_live(config.live, console=console):
        console.error("live publish cancelled")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    return config.live


def publish(
    target: Target | None = typer.Option(
        None,
        "--target",
        help="Skip the interactive choice: queue or live",
        show_default=False,
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask before publishing live"),
    config: Path | None = config_option(),
) -> None:
    """Build, then publish to the queue or the live site."""
    ctx = build_context(config)

    validated = validate_for(ctx.config, target.value if target is not None else None)
    if isinstance(validated, Err):
        exit_on_error(validated.error, ctx.console)

    chosen = _choose_target(validated.value, target=target, yes=yes, console=ctx.console)

    orchestrator = PublishOrchestrator(
        config=validated.value,
        console=ctx.console,
        open_url=open_in_browser,
    )
    report = orchestrator.run(chosen)

    match report.outcome:
        case Ok():
            ctx.console.newline()
            ctx.console.success(report.entry.message)
        case Err(error):
            if isinstance(chosen, LiveTarget) and chosen.marker_path.exists():
                ctx.console.warning(f"site stays in maintenance mode: {chosen.marker_path}")
            exit_on_error(error, ctx.console)
