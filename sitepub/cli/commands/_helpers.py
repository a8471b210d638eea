"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from sitepub.output.errors import print_publish_error, publish_error_exit_code

if TYPE_CHECKING:
    from sitepub.output.console import ConsoleProtocol
    from sitepub.services.errors import PublishError


def config_option() -> Path | None:
    return typer.Option(
        None,
        "--config",
        help="Path to sitepub.toml (default: ./sitepub.toml)",
        show_default=False,
    )


def exit_on_error(error: PublishError, console: ConsoleProtocol) -> NoReturn:
    """Print error and exit with its mapped code.

    Replaces the common pattern:
        print_publish_error(error, console)
        raise typer.Exit(code=publish_error_exit_code(error))
    """
    print_publish_error(error, console)
    raise typer.Exit(code=publish_error_exit_code(error))
