from __future__ import annotations

from pathlib import Path

import pytest

from sitepub.cli.selector import confirm_live, select_target
from sitepub.core.config import PublishConfig
from sitepub.core.model import LiveTarget, QueueTarget
from sitepub.output.console import MockConsole


def _config(tmp_path: Path) -> PublishConfig:
    return PublishConfig(
        project_root=tmp_path,
        live=LiveTarget(directory=tmp_path / "live", url="https://app.example.com"),
        queue=QueueTarget(directory=tmp_path / "queue"),
    )


def test_queue_choice_needs_no_confirmation(tmp_path: Path) -> None:
    cfg = _config(tmp_path)
    console = MockConsole(answers=["1"])

    assert select_target(config=cfg, console=console) == cfg.queue
    assert len(console.prompts) == 1


def test_live_choice_requires_y(tmp_path: Path) -> None:
    cfg = _config(tmp_path)
    console = MockConsole(answers=["2", "y"])

    assert select_target(config=cfg, console=console) == cfg.live
    assert len(console.prompts) == 2


def test_invalid_choice_reprompts(tmp_path: Path) -> None:
    cfg = _config(tmp_path)
    console = MockConsole(answers=["3", "", "queue", " 1 "])

    assert select_target(config=cfg, console=console) == cfg.queue
    assert len(console.find("invalid choice")) == 3


def test_declined_confirmation_returns_to_selection(tmp_path: Path) -> None:
    cfg = _config(tmp_path)
    console = MockConsole(answers=["2", "n", "2", "yes", "1"])

    assert select_target(config=cfg, console=console) == cfg.queue
    assert len(console.prompts) == 5
    assert len(console.find("not confirmed")) == 2


def test_requires_both_targets(tmp_path: Path) -> None:
    cfg = PublishConfig(project_root=tmp_path, queue=QueueTarget(directory=tmp_path))

    with pytest.raises(ValueError, match="both queue and live"):
        select_target(config=cfg, console=MockConsole())


@pytest.mark.parametrize(
    ("answer", "expected"), [("y", True), ("Y ", True), ("n", False), ("", False)]
)
def test_confirm_live(tmp_path: Path, answer: str, expected: bool) -> None:
    target = LiveTarget(directory=tmp_path, url="https://app.example.com")

    assert confirm_live(target, console=MockConsole(answers=[answer])) is expected
