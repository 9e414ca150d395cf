"""Production executor using subprocess."""

import logging
import subprocess
from collections.abc import Sequence

from gitpr.gateway.executor.abc import (
    Executor,
    NonZeroExitError,
    ProcessLaunchError,
    trim_trailing_newline,
)

logger = logging.getLogger(__name__)


class SubprocessExecutor(Executor):
    """Runs a real program via subprocess.

    The program is resolved from PATH by the operating system, just like a
    shell would, unless an explicit path is given.
    """

    def __init__(self, program: str = "git") -> None:
        self._program = program

    @property
    def program(self) -> str:
        return self._program

    def run_silent(self, args: Sequence[str]) -> None:
        """Run with stdout and stderr inherited from this process."""
        cmd = [self._program, *args]
        logger.debug("run_silent: %s", cmd)
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise ProcessLaunchError(self._program, e) from e
        _check_returncode(cmd, result.returncode)

    def run_capturing(self, args: Sequence[str]) -> str:
        """Run with stdout captured and stderr inherited from this process."""
        cmd = [self._program, *args]
        logger.debug("run_capturing: %s", cmd)
        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, check=False)
        except OSError as e:
            raise ProcessLaunchError(self._program, e) from e
        _check_returncode(cmd, result.returncode)

        return trim_trailing_newline(result.stdout.decode("utf-8", errors="replace"))


def _check_returncode(cmd: list[str], returncode: int) -> None:
    if returncode != 0:
        logger.debug("%s exited with status %d", cmd, returncode)
        raise NonZeroExitError(cmd, returncode)
