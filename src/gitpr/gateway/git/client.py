"""Client for the git command line program.

If you think of git's command line interface as a sort of API, GitClient is
our API client. It exposes only what the PR workflow needs and keeps as much
logic as possible out of git's hands: everything that interprets git's output
lives in ``gitpr.branches`` and can be tested without a subprocess.

Every invocation carries ``-C <workdir>`` so the client can operate on a
repository other than the process's current directory.
"""

import logging
from pathlib import Path

from gitpr.branches.extraction import TRUNK_BRANCH
from gitpr.branches.list_of import ListOf
from gitpr.branches.local_branch import LocalBranch
from gitpr.gateway.executor.abc import Executor

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"


class GitClient:
    """Domain operations on one repository, run through an Executor.

    All operations block until git exits and raise ExecutionError on failure.
    Nothing is retried and nothing is cached; the repository is queried fresh
    on every call.
    """

    def __init__(
        self,
        executor: Executor,
        workdir: Path,
        *,
        trunk: str = TRUNK_BRANCH,
        remote: str = DEFAULT_REMOTE,
    ) -> None:
        self._executor = executor
        self._workdir = workdir
        self._trunk = trunk
        self._remote = remote

    @property
    def workdir(self) -> Path:
        return self._workdir

    @property
    def trunk(self) -> str:
        return self._trunk

    @property
    def remote(self) -> str:
        return self._remote

    def _args(self, *args: str) -> list[str]:
        return ["-C", str(self._workdir), *args]

    def version(self) -> str:
        """Report the version of the underlying git binary.

        Equivalent to ``git --version``. Very old versions of git may not
        behave the way this tool expects, so this is a first debugging step.
        """
        return self._executor.run_capturing(self._args("--version"))

    def fetch_prune(self) -> None:
        """Update remote-tracking branches, dropping those deleted upstream.

        This lets the user see the same set of current PRs as their
        collaborators.
        """
        logger.debug("fetching from remotes in %s", self._workdir)
        self._executor.run_silent(self._args("fetch", "--prune"))

    def all_branches(self) -> str:
        """List every local and remote-tracking branch (``git branch -a``)."""
        return self._executor.run_capturing(self._args("branch", "-a"))

    def all_remote_branches(self) -> str:
        """List remote-tracking branches only (``git branch -r``)."""
        return self._executor.run_capturing(self._args("branch", "-r"))

    def all_local_branches(self) -> ListOf[LocalBranch]:
        """List local branches as parsed records."""
        output = self._executor.run_capturing(self._args("branch"))
        return ListOf.parse(output, LocalBranch.parse)

    def merged_branches(self) -> ListOf[LocalBranch]:
        """List local branches already merged into trunk."""
        output = self._executor.run_capturing(self._args("branch", "--merged", self._trunk))
        return ListOf.parse(output, LocalBranch.parse)

    def rev_parse_head(self) -> str:
        """Resolve HEAD to its short commit hash."""
        return self._executor.run_capturing(self._args("rev-parse", "--short", "HEAD")).strip()

    def create_branch(self, name: str) -> None:
        """Create a new branch and switch to it."""
        logger.debug("creating branch %s", name)
        self._executor.run_silent(self._args("checkout", "-b", name))

    def delete_branch(self, name: str) -> None:
        """Delete a local branch.

        git refuses to delete a branch that is not fully merged; that refusal
        surfaces as NonZeroExitError so callers can decide whether to go on.
        """
        logger.debug("deleting branch %s", name)
        self._executor.run_silent(self._args("branch", "-d", name))

    def force_delete_branch(self, name: str) -> None:
        """Delete a local branch even if it is not merged."""
        logger.debug("force deleting branch %s", name)
        self._executor.run_silent(self._args("branch", "-D", name))

    def push_upstream(self, name: str) -> None:
        """Publish a branch to the remote and record it as upstream."""
        logger.debug("pushing %s to %s", name, self._remote)
        self._executor.run_silent(self._args("push", "-u", self._remote, name))

    def push_delete(self, name: str) -> None:
        """Delete a branch on the remote."""
        logger.debug("deleting %s on %s", name, self._remote)
        self._executor.run_silent(self._args("push", "--delete", self._remote, name))
