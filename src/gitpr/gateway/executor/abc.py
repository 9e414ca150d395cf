"""Abstract interface for running an external program.

Our needs from subprocess are small: run a program and either let its output
reach the console, or capture its stdout as text. Keeping that behind an ABC
lets the git client run against a scripted fake in unit tests.

Architecture:
- Executor: Abstract base class defining the interface
- SubprocessExecutor: Production implementation using subprocess
- FakeExecutor: Scripted implementation for tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ExecutionError(Exception):
    """Base class for failures while running the external program."""


class ProcessLaunchError(ExecutionError):
    """The program could not be started (not found, not executable, ...)."""

    def __init__(self, program: str, cause: OSError) -> None:
        super().__init__(f"failed to launch '{program}': {cause}")
        self.program = program
        self.cause = cause


class NonZeroExitError(ExecutionError):
    """The program ran but reported failure through its exit status."""

    def __init__(self, args: Sequence[str], returncode: int) -> None:
        command = " ".join(args)
        super().__init__(f"'{command}' exited with status {returncode}")
        self.command = list(args)
        self.returncode = returncode


class Executor(ABC):
    """Abstract interface for a configured external program.

    All implementations (real and fake) must implement this interface.
    Neither operation retries; every failure is raised immediately.
    """

    @abstractmethod
    def run_silent(self, args: Sequence[str]) -> None:
        """Run the program with stdout and stderr forwarded to the console.

        Args:
            args: Arguments passed to the program

        Raises:
            ProcessLaunchError: If the program cannot be started
            NonZeroExitError: If the program exits with a non-zero status
        """
        ...

    @abstractmethod
    def run_capturing(self, args: Sequence[str]) -> str:
        """Run the program and return its stdout as text.

        Stderr is forwarded to the console. One trailing newline sequence is
        removed from the captured output.

        Args:
            args: Arguments passed to the program

        Returns:
            Decoded stdout without its final newline

        Raises:
            ProcessLaunchError: If the program cannot be started
            NonZeroExitError: If the program exits with a non-zero status
        """
        ...


def trim_trailing_newline(text: str) -> str:
    """Remove a single trailing ``\\n`` or ``\\r\\n`` from text."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
