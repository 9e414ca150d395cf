"""Tests for SubprocessExecutor.

The Python interpreter running the tests stands in for the external program,
so these tests launch real processes without depending on git.
"""

import sys
from pathlib import Path

import pytest

from gitpr.gateway.executor.abc import NonZeroExitError, ProcessLaunchError
from gitpr.gateway.executor.real import SubprocessExecutor


@pytest.fixture
def python() -> SubprocessExecutor:
    return SubprocessExecutor(program=sys.executable)


def test_defaults_to_git() -> None:
    assert SubprocessExecutor().program == "git"


def test_run_capturing_returns_stdout(python: SubprocessExecutor) -> None:
    assert python.run_capturing(["-c", "print('hello')"]) == "hello"


def test_run_capturing_trims_only_one_trailing_newline(python: SubprocessExecutor) -> None:
    assert python.run_capturing(["-c", "print('a\\n')"]) == "a\n"


def test_run_capturing_keeps_leading_whitespace(python: SubprocessExecutor) -> None:
    output = python.run_capturing(["-c", "print('  one'); print('* two')"])

    assert output == "  one\n* two"


def test_run_capturing_replaces_undecodable_bytes(python: SubprocessExecutor) -> None:
    output = python.run_capturing(["-c", "import sys; sys.stdout.buffer.write(b'x\\xff')"])

    assert output == "x�"


def test_run_capturing_forwards_stderr(
    python: SubprocessExecutor, capfd: pytest.CaptureFixture[str]
) -> None:
    output = python.run_capturing(
        ["-c", "import sys; print('out'); print('oops', file=sys.stderr)"]
    )

    assert output == "out"
    assert "oops" in capfd.readouterr().err


def test_run_capturing_is_repeatable(python: SubprocessExecutor) -> None:
    args = ["-c", "print('same')"]

    assert python.run_capturing(args) == python.run_capturing(args)


def test_run_silent_forwards_stdout(
    python: SubprocessExecutor, capfd: pytest.CaptureFixture[str]
) -> None:
    python.run_silent(["-c", "print('visible')"])

    assert "visible" in capfd.readouterr().out


def test_non_zero_exit_raises(python: SubprocessExecutor) -> None:
    with pytest.raises(NonZeroExitError) as exc_info:
        python.run_capturing(["-c", "import sys; sys.exit(3)"])

    assert exc_info.value.returncode == 3


def test_run_silent_non_zero_exit_raises(python: SubprocessExecutor) -> None:
    with pytest.raises(NonZeroExitError) as exc_info:
        python.run_silent(["-c", "import sys; sys.exit(1)"])

    assert exc_info.value.returncode == 1


def test_missing_program_raises_launch_error(tmp_path: Path) -> None:
    missing = tmp_path / "no-such-git"
    executor = SubprocessExecutor(program=str(missing))

    with pytest.raises(ProcessLaunchError) as exc_info:
        executor.run_capturing(["--version"])

    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert exc_info.value.program == str(missing)


def test_run_silent_missing_program_raises_launch_error(tmp_path: Path) -> None:
    executor = SubprocessExecutor(program=str(tmp_path / "no-such-git"))

    with pytest.raises(ProcessLaunchError):
        executor.run_silent(["--version"])
