"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitpr.config import GitPrConfig, find_repo_root, load_config
from gitpr.gateway.executor.abc import Executor
from gitpr.gateway.executor.fake import FakeExecutor
from gitpr.gateway.executor.real import SubprocessExecutor
from gitpr.gateway.git.client import GitClient


@dataclass(frozen=True)
class GitPrContext:
    """Immutable context holding all dependencies for git-pr commands.

    Created at the CLI entry point and passed to commands as the click object.
    Frozen to prevent accidental modification at runtime.
    """

    git: GitClient
    config: GitPrConfig
    cwd: Path

    @staticmethod
    def for_test(
        executor: Executor | None = None,
        cwd: Path | None = None,
        config: GitPrConfig | None = None,
    ) -> "GitPrContext":
        """Create a context around a fake executor.

        Args:
            executor: Executor to use; defaults to an empty FakeExecutor
            cwd: Working directory; defaults to /repo (never touched by fakes)
            config: Configuration; defaults to GitPrConfig.default()
        """
        resolved_executor = executor if executor is not None else FakeExecutor()
        resolved_cwd = cwd if cwd is not None else Path("/repo")
        resolved_config = config if config is not None else GitPrConfig.default()
        return GitPrContext(
            git=_build_git_client(resolved_executor, resolved_cwd, resolved_config),
            config=resolved_config,
            cwd=resolved_cwd,
        )


def create_context(cwd: Path) -> GitPrContext:
    """Create the production context for a directory inside a repository.

    Configuration is read from the root of the repository containing cwd, so
    commands behave the same from any subdirectory. Outside a repository, cwd
    itself is searched.

    Raises:
        ConfigError: If .git-pr.toml is invalid
    """
    repo_root = find_repo_root(cwd)
    config = load_config(repo_root if repo_root is not None else cwd)
    executor = SubprocessExecutor()
    return GitPrContext(git=_build_git_client(executor, cwd, config), config=config, cwd=cwd)


def _build_git_client(executor: Executor, cwd: Path, config: GitPrConfig) -> GitClient:
    return GitClient(executor, cwd, trunk=config.trunk, remote=config.remote)
