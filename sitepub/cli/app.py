from __future__ import annotations

import typer

from sitepub import __version__
from sitepub.cli.commands.log_cmd import log
from sitepub.cli.commands.publish_cmd import publish
from sitepub.cli.commands.status import status

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(publish)
app.command()(status)
app.command("log")(log)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Build and publish a web application to a queue or the live site."""


def main() -> None:
    app()
