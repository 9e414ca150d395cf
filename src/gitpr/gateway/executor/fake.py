"""Scripted executor for testing.

FakeExecutor never launches a process. It answers each argument list from a
pre-configured table and records every call so tests can assert on the exact
git invocations that production code made.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from gitpr.gateway.executor.abc import (
    Executor,
    NonZeroExitError,
    ProcessLaunchError,
    trim_trailing_newline,
)


@dataclass(frozen=True)
class FakeResponse:
    """Scripted outcome for one argument list."""

    stdout: str = ""
    returncode: int = 0


class FakeExecutor(Executor):
    """In-memory fake implementation of Executor.

    Constructor Injection:
    ---------------------
    - responses: Mapping of argument tuple -> FakeResponse
    - launch_error: OSError to report as a ProcessLaunchError on every call

    Argument lists without a scripted response behave like a program that
    does not understand them: they exit with status 1.

    Mutation Tracking:
    -----------------
    - calls: Every argument tuple received, in order

    Examples:
    ---------
        executor = FakeExecutor(
            responses={("--version",): FakeResponse(stdout="fake_git version 1\\n")},
        )
        assert executor.run_capturing(["--version"]) == "fake_git version 1"
        assert executor.calls == [("--version",)]
    """

    def __init__(
        self,
        *,
        responses: Mapping[tuple[str, ...], FakeResponse] | None = None,
        launch_error: OSError | None = None,
        program: str = "fake_git",
    ) -> None:
        self._responses = dict(responses) if responses is not None else {}
        self._launch_error = launch_error
        self._program = program
        self._calls: list[tuple[str, ...]] = []

    @property
    def calls(self) -> list[tuple[str, ...]]:
        """Argument tuples received so far.

        Returns a copy to prevent external mutation.
        """
        return list(self._calls)

    def run_silent(self, args: Sequence[str]) -> None:
        self._run(args)

    def run_capturing(self, args: Sequence[str]) -> str:
        return trim_trailing_newline(self._run(args).stdout)

    def _run(self, args: Sequence[str]) -> FakeResponse:
        key = tuple(args)
        self._calls.append(key)
        if self._launch_error is not None:
            raise ProcessLaunchError(self._program, self._launch_error)

        response = self._responses.get(key, FakeResponse(returncode=1))
        if response.returncode != 0:
            raise NonZeroExitError([self._program, *key], response.returncode)
        return response
