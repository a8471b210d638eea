from __future__ import annotations

import sys
from pathlib import Path

from sitepub.core.result import Err, Ok
from sitepub.output.console import MockConsole
from sitepub.services.build import BuildVerifier
from sitepub.services.errors import BuildFailure, PublishFailure
from sitepub.services.publish import PublishInvoker

PY = sys.executable
WRITE_INDEX = "import pathlib, sys; pathlib.Path(sys.argv[1], 'index.html').write_text('fresh')"


def test_build_success(tmp_path: Path) -> None:
    console = MockConsole()
    verifier = BuildVerifier(command=[PY, "-c", "pass"], project_root=tmp_path, console=console)

    assert verifier.verify() == Ok(None)
    assert console.has_success()


def test_build_nonzero_exit_is_build_failure(tmp_path: Path) -> None:
    verifier = BuildVerifier(
        command=[PY, "-c", "import sys; sys.exit(2)"],
        project_root=tmp_path,
        console=MockConsole(),
    )

    result = verifier.verify()

    assert isinstance(result, Err)
    assert result.error == BuildFailure(returncode=2)
    assert result.error.message == "build did not return a success code of 0."


def test_build_missing_executable(tmp_path: Path) -> None:
    verifier = BuildVerifier(
        command=["nonexistent_build_tool_12345"], project_root=tmp_path, console=MockConsole()
    )

    result = verifier.verify()

    assert isinstance(result, Err)
    assert result.error.returncode == -1
    assert result.error.detail


def test_build_runs_in_project_root(tmp_path: Path) -> None:
    code = "import pathlib; pathlib.Path('built.flag').write_text('1')"
    BuildVerifier(command=[PY, "-c", code], project_root=tmp_path, console=MockConsole()).verify()

    assert (tmp_path / "built.flag").exists()


def test_publish_appends_directory_argument(tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()
    console = MockConsole()
    invoker = PublishInvoker(
        command=[PY, "-c", WRITE_INDEX], project_root=tmp_path, console=console
    )

    assert invoker.publish(out) == Ok(None)
    assert (out / "index.html").read_text() == "fresh"
    assert console.find(str(out))


def test_publish_nonzero_exit_is_publish_failure(tmp_path: Path) -> None:
    invoker = PublishInvoker(
        command=[PY, "-c", "import sys; sys.exit(1)"],
        project_root=tmp_path,
        console=MockConsole(),
    )

    result = invoker.publish(tmp_path / "out")

    assert isinstance(result, Err)
    assert result.error == PublishFailure(returncode=1, directory=tmp_path / "out")
    assert result.error.message == "publish did not return a success code of 0."
