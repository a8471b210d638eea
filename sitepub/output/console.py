"""Operator console.

Services never print directly: they report through ConsoleProtocol. Messages
are plain text: brackets such as "[y/N]" or "[live]" are shown as typed. The
protocol also carries `prompt`, the one input primitive the mode selector
needs, so interactive flows run in tests against scripted answers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
]


class Style(Enum):
    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Prefix shown before one-line status messages, per style.
_PREFIXES: dict[Style, str] = {
    Style.SUCCESS: "OK",
    Style.ERROR: "error:",
    Style.WARNING: "warning:",
    Style.INFO: "info:",
}

_RICH_STYLES: dict[Style, str] = {
    Style.SUCCESS: "green",
    Style.ERROR: "red bold",
    Style.WARNING: "yellow",
    Style.INFO: "cyan",
    Style.DIM: "dim",
    Style.HEADER: "blue bold",
}


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def newline(self) -> None: ...

    def prompt(self, message: str) -> str:
        """Block until the operator enters a line, and return it."""
        ...


class RichConsole:
    def __init__(self, console: Console | None = None) -> None:
        if console is None:
            from rich import console as rich_console

            console = rich_console.Console()
        self._console = console

    def _status(self, style: Style, message: str) -> None:
        from rich.markup import escape

        rich_style = _RICH_STYLES[style]
        self._console.print(f"[{rich_style}]{_PREFIXES[style]}[/{rich_style}] {escape(message)}")

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(message, style=_RICH_STYLES.get(style), markup=False)

    def success(self, message: str) -> None:
        self._status(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._status(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._status(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._status(Style.INFO, message)

    def header(self, message: str) -> None:
        self._console.print()
        self._console.print(message, style=_RICH_STYLES[Style.HEADER], markup=False)

    def newline(self) -> None:
        self._console.print()

    def prompt(self, message: str) -> str:
        from rich.markup import escape

        return self._console.input(f"[bold]{escape(message)}[/bold] ")


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    style: Style


@dataclass
class MockConsole:
    """Records output instead of rendering it.

    `prompt` pops `answers` front to back and logs each question in `prompts`.
    """

    outputs: list[OutputRecord] = field(default_factory=list[OutputRecord])
    answers: list[str] = field(default_factory=list[str])
    prompts: list[str] = field(default_factory=list[str])

    def _status(self, style: Style, message: str) -> None:
        self.outputs.append(OutputRecord(f"{_PREFIXES[style]} {message}", style))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self._status(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._status(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._status(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._status(Style.INFO, message)

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise RuntimeError(f"no scripted answer for prompt: {message}")
        return self.answers.pop(0)

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def _has(self, style: Style) -> bool:
        return any(o.style is style for o in self.outputs)

    def has_error(self) -> bool:
        return self._has(Style.ERROR)

    def has_warning(self) -> bool:
        return self._has(Style.WARNING)

    def has_success(self) -> bool:
        return self._has(Style.SUCCESS)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
