from __future__ import annotations

from pathlib import Path

import pytest

from sitepub.core.config import ConfigurationError
from sitepub.core.errors import ErrorCode
from sitepub.output.console import MockConsole
from sitepub.output.errors import print_publish_error, publish_error_exit_code
from sitepub.services.errors import BuildFailure, FilesystemError, PublishError, PublishFailure


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigurationError("missing [live]"), ErrorCode.CONFIG_ERROR),
        (BuildFailure(returncode=1), ErrorCode.BUILD_ERROR),
        (PublishFailure(returncode=1, directory=Path("out")), ErrorCode.PUBLISH_ERROR),
        (FilesystemError(action="clear", path=Path("out"), reason="busy"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: PublishError, code: ErrorCode) -> None:
    assert publish_error_exit_code(error) == int(code)


def test_build_failure_message() -> None:
    console = MockConsole()
    print_publish_error(BuildFailure(returncode=3), console)

    assert console.messages == ["error: build did not return a success code of 0. (exit 3)"]


def test_publish_failure_shows_target() -> None:
    console = MockConsole()
    print_publish_error(PublishFailure(returncode=1, directory=Path("site")), console)

    assert "publish did not return a success code of 0." in console.messages[0]
    assert console.messages[1] == f"target: {Path('site')}"


def test_configuration_error_shows_path() -> None:
    console = MockConsole()
    print_publish_error(ConfigurationError("bad", path=Path("sitepub.toml")), console)

    assert console.messages == ["error: bad", "config: sitepub.toml"]


def test_filesystem_error_message() -> None:
    console = MockConsole()
    error = FilesystemError(action="clear", path=Path("site"), reason="Access is denied")
    print_publish_error(error, console)

    assert console.messages == [f"error: failed to clear {Path('site')}: Access is denied"]
