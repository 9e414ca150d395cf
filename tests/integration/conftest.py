"""Fixtures for tests that run the real git binary."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout


def init_git_repo(repo: Path, trunk: str) -> None:
    """Initialize a repository with one empty commit on the trunk branch."""
    run_git(repo, "init")
    run_git(repo, "config", "user.email", "you@example.com")
    run_git(repo, "config", "user.name", "Your Name")
    run_git(repo, "checkout", "-b", trunk)
    run_git(repo, "commit", "--allow-empty", "-m", "hello")


@dataclass(frozen=True)
class RepoWithRemote:
    work: Path
    remote: Path


@pytest.fixture
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's git configuration out of the tests."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")


@pytest.fixture
def repo_with_remote(tmp_path: Path, isolated_git_env: None) -> RepoWithRemote:
    """A working repository on trunk whose origin is a local bare repository."""
    remote = tmp_path / "remote.git"
    remote.mkdir()
    run_git(remote, "init", "--bare")

    work = tmp_path / "work"
    work.mkdir()
    init_git_repo(work, "trunk")
    run_git(work, "remote", "add", "origin", str(remote))
    run_git(work, "push", "-u", "origin", "trunk")

    return RepoWithRemote(work=work, remote=remote)
