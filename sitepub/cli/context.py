from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from sitepub.core.config import CONFIG_FILE_NAME, PublishConfig, load_config
from sitepub.core.errors import ErrorCode
from sitepub.core.result import Err
from sitepub.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_root: Path
    config_path: Path
    config: PublishConfig
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    project_root = Path.cwd()
    path = config_path.expanduser() if config_path is not None else project_root / CONFIG_FILE_NAME
    if not path.is_absolute():
        path = project_root / path

    config_result = load_config(path, project_root=project_root)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(
        project_root=project_root,
        config_path=path,
        config=config_result.value,
        console=RichConsole(),
    )
