"""Typed configuration loading and validation.

This module provides dataclasses for the sitepub.toml structure. The file
lives in the project directory the operator runs sitepub from:

    [build]
    command = ["dotnet", "build"]

    [publish]
    command = ["dotnet", "publish", "--output"]

    [live]
    directory = "D:/sites/app"
    url = "https://app.example.com"
    marker = "app_offline.htm"
    grace_seconds = 5

    [queue]
    directory = "D:/deploy/queue/app"

    [files]
    log = "publish-log.csv"
    notes = "release-notes.txt"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .model import LiveTarget, QueueTarget, TargetKind
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_number, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_BUILD_COMMAND",
    "DEFAULT_GRACE_SECONDS",
    "DEFAULT_LOG_FILE",
    "DEFAULT_MARKER_NAME",
    "DEFAULT_NOTES_FILE",
    "DEFAULT_PUBLISH_COMMAND",
    "ConfigurationError",
    "PublishConfig",
    "load_config",
    "validate_for",
]

CONFIG_FILE_NAME = "sitepub.toml"

DEFAULT_BUILD_COMMAND = ("dotnet", "build")
DEFAULT_PUBLISH_COMMAND = ("dotnet", "publish", "--output")
DEFAULT_MARKER_NAME = "app_offline.htm"
DEFAULT_GRACE_SECONDS = 5.0
DEFAULT_LOG_FILE = "publish-log.csv"
DEFAULT_NOTES_FILE = "release-notes.txt"


@dataclass(frozen=True, slots=True)
class ConfigurationError:
    """Error when config cannot be loaded, parsed or does not cover a target."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PublishConfig:
    """Validated configuration passed to the orchestrator."""

    project_root: Path
    build_command: tuple[str, ...] = DEFAULT_BUILD_COMMAND
    publish_command: tuple[str, ...] = DEFAULT_PUBLISH_COMMAND
    live: LiveTarget | None = None
    queue: QueueTarget | None = None
    log_path: Path | None = None
    notes_path: Path | None = None

    @property
    def audit_log_path(self) -> Path:
        return self.log_path or self.project_root / DEFAULT_LOG_FILE

    @property
    def release_notes_path(self) -> Path:
        return self.notes_path or self.project_root / DEFAULT_NOTES_FILE

    @classmethod
    def from_dict(
        cls, data: Mapping[str, object], *, project_root: Path
    ) -> Result[PublishConfig, ConfigurationError]:
        """Create a PublishConfig from a mapping (parsed TOML)."""
        build: StrDict = get_table(data, "build") or {}
        publish: StrDict = get_table(data, "publish") or {}
        live: StrDict = get_table(data, "live") or {}
        queue: StrDict = get_table(data, "queue") or {}
        files: StrDict = get_table(data, "files") or {}

        def resolve(raw: str | None) -> Path | None:
            if raw is None:
                return None
            p = Path(raw).expanduser()
            return p if p.is_absolute() else project_root / p

        build_cmd = DEFAULT_BUILD_COMMAND
        if "command" in build:
            parsed = get_str_list(build, "command")
            if not parsed:
                return Err(
                    ConfigurationError("[build] command must be a non-empty list of strings")
                )
            build_cmd = parsed

        publish_cmd = DEFAULT_PUBLISH_COMMAND
        if "command" in publish:
            parsed = get_str_list(publish, "command")
            if not parsed:
                return Err(
                    ConfigurationError("[publish] command must be a non-empty list of strings")
                )
            publish_cmd = parsed

        grace = DEFAULT_GRACE_SECONDS
        if "grace_seconds" in live:
            value = get_number(live, "grace_seconds")
            if value is None or value < 0:
                return Err(ConfigurationError("[live] grace_seconds must be a number >= 0"))
            grace = value

        live_dir = resolve(get_str(live, "directory"))
        live_url = get_str(live, "url")
        live_target: LiveTarget | None = None
        if live_dir is not None or live_url is not None:
            if live_dir is None or live_url is None:
                return Err(ConfigurationError("[live] requires both directory and url"))
            live_target = LiveTarget(
                directory=live_dir,
                url=live_url,
                marker_name=get_str(live, "marker") or DEFAULT_MARKER_NAME,
                grace_seconds=grace,
            )

        queue_dir = resolve(get_str(queue, "directory"))

        return Ok(
            cls(
                project_root=project_root,
                build_command=build_cmd,
                publish_command=publish_cmd,
                live=live_target,
                queue=QueueTarget(directory=queue_dir) if queue_dir is not None else None,
                log_path=resolve(get_str(files, "log")),
                notes_path=resolve(get_str(files, "notes")),
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigurationError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigurationError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigurationError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigurationError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigurationError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigurationError(f"Error reading config: {e}", path=path))


def load_config(path: Path, *, project_root: Path) -> Result[PublishConfig, ConfigurationError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to sitepub.toml
        project_root: Directory relative paths in the file resolve against

    Returns:
        Ok(PublishConfig) on success, Err(ConfigurationError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    parsed = PublishConfig.from_dict(result.value, project_root=project_root)
    if isinstance(parsed, Err):
        return Err(ConfigurationError(parsed.error.message, path=path))
    return parsed


def validate_for(
    config: PublishConfig, kind: TargetKind | None
) -> Result[PublishConfig, ConfigurationError]:
    """Check that config covers the targets a run may select.

    kind=None means the operator picks interactively, so both targets are
    required.
    """
    wanted: tuple[TargetKind, ...] = ("queue", "live") if kind is None else (kind,)
    missing: list[str] = []
    if "queue" in wanted and config.queue is None:
        missing.append("[queue] directory")
    if "live" in wanted and config.live is None:
        missing.append("[live] directory and url")

    if missing:
        return Err(ConfigurationError(f"not configured: {', '.join(missing)}"))
    return Ok(config)
