import tomllib
from dataclasses import dataclass
from pathlib import Path

from gitpr.branches.extraction import TRUNK_BRANCH, PrPattern, SuffixPolicy
from gitpr.gateway.git.client import DEFAULT_REMOTE

CONFIG_FILENAME = ".git-pr.toml"

# Keys that must not come from a file committed to the repository
_FORBIDDEN_KEYS = ("git",)

# Accepted as `pull_requests.remote` to mean "branches on any remote"
ANY_REMOTE = "*"


class ConfigError(ValueError):
    """The config file exists but holds an invalid value."""


@dataclass(frozen=True)
class GitPrConfig:
    """In-memory representation of `.git-pr.toml`.

    Example .git-pr.toml:
      trunk = "trunk"
      remote = "origin"

      [pull_requests]
      # "*" accepts PR branches from any remote
      remote = "*"
      # "hex" or "decimal"
      suffix = "hex"

      [clean]
      stop_on_error = false
    """

    trunk: str
    remote: str
    pr_pattern: PrPattern
    clean_stop_on_error: bool

    @staticmethod
    def default() -> "GitPrConfig":
        return GitPrConfig(
            trunk=TRUNK_BRANCH,
            remote=DEFAULT_REMOTE,
            pr_pattern=PrPattern(remote=None, suffix=SuffixPolicy.HEX),
            clean_stop_on_error=False,
        )


def find_repo_root(start: Path) -> Path | None:
    """Find the closest directory at or above start that holds a `.git` entry.

    `.git` is a directory in a normal checkout and a file in worktrees and
    submodules; both count.
    """
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def load_config(repo_dir: Path) -> GitPrConfig:
    """Load .git-pr.toml from the given directory if present; otherwise return defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds an invalid value
    """
    cfg_path = repo_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return GitPrConfig.default()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{cfg_path}: {e}") from e

    for key in _FORBIDDEN_KEYS:
        if key in data:
            raise ConfigError(f"{cfg_path}: {key} cannot be set in {CONFIG_FILENAME}")

    defaults = GitPrConfig.default()
    prs = _table(data, "pull_requests", cfg_path)
    clean = _table(data, "clean", cfg_path)

    pr_remote = _string(prs, "remote", ANY_REMOTE, cfg_path)
    suffix_value = _string(prs, "suffix", SuffixPolicy.HEX.value, cfg_path)
    try:
        suffix = SuffixPolicy(suffix_value)
    except ValueError as e:
        choices = ", ".join(p.value for p in SuffixPolicy)
        raise ConfigError(
            f"{cfg_path}: pull_requests.suffix must be one of {choices}, got {suffix_value!r}"
        ) from e

    stop_on_error = clean.get("stop_on_error", defaults.clean_stop_on_error)
    if not isinstance(stop_on_error, bool):
        raise ConfigError(f"{cfg_path}: clean.stop_on_error must be a boolean")

    return GitPrConfig(
        trunk=_string(data, "trunk", defaults.trunk, cfg_path),
        remote=_string(data, "remote", defaults.remote, cfg_path),
        pr_pattern=PrPattern(
            remote=None if pr_remote == ANY_REMOTE else pr_remote,
            suffix=suffix,
        ),
        clean_stop_on_error=stop_on_error,
    )


def _table(data: dict, key: str, cfg_path: Path) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{cfg_path}: [{key}] must be a table")
    return value


def _string(data: dict, key: str, default: str, cfg_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{cfg_path}: {key} must be a non-empty string")
    return value
