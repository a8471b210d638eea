"""Interactive target selection.

Two states: SelectingMode accepts exactly "1" (queue) or "2" (live) and
re-prompts on anything else; AwaitingConfirmation accepts "y" to proceed
and returns to SelectingMode on any other answer.
"""

from __future__ import annotations

from typing import Literal

from sitepub.core.config import PublishConfig
from sitepub.core.model import LiveTarget, PublishTarget
from sitepub.output.console import ConsoleProtocol, Style

SelectorStep = Literal["selecting_mode", "awaiting_confirmation"]

QUEUE_CHOICE = "1"
LIVE_CHOICE = "2"


def confirm_live(target: LiveTarget, *, console: ConsoleProtocol) -> bool:
    console.warning(f"{target.url} will go offline while {target.directory} is replaced")
    answer = console.prompt("Publish immediately to the live site? [y/N]:")
    return answer.strip().lower() == "y"


def select_target(*, config: PublishConfig, console: ConsoleProtocol) -> PublishTarget:
    """Block until the operator picks a target and confirms it."""
    queue, live = config.queue, config.live
    if queue is None or live is None:
        raise ValueError("target selection requires both queue and live targets")

    step: SelectorStep = "selecting_mode"
    while True:
        if step == "selecting_mode":
            console.header("Publish target")
            console.print(f"  {QUEUE_CHOICE}. publish to queue", Style.DEFAULT)
            console.print(f"     {queue.directory}", Style.DIM)
            console.print(f"  {LIVE_CHOICE}. publish immediately to live", Style.DEFAULT)
            console.print(f"     {live.url} ({live.directory})", Style.DIM)

            choice = console.prompt(f"Select target [{QUEUE_CHOICE}/{LIVE_CHOICE}]:").strip()
            if choice == QUEUE_CHOICE:
                return queue
            if choice == LIVE_CHOICE:
                step = "awaiting_confirmation"
                continue
            console.error(f"invalid choice: {choice!r}")
            continue

        if confirm_live(live, console=console):
            return live
        console.info("live publish not confirmed")
        step = "selecting_mode"
