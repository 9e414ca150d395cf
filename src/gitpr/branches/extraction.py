"""Pure functions deciding which branches are pull requests or deletable.

Nothing here talks to git. Every function takes text (or records parsed from
text) that the git client produced and returns plain branch names.

Pull request branches follow the naming schema ``<pr-name>/<suffix>``, where
the suffix is a short commit hash. On a remote they appear in ``git branch -a``
output as ``remotes/<remote>/<pr-name>/<suffix>``. Which remotes count and
what a suffix may contain is described by a PrPattern.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from gitpr.branches.list_of import ListOf
from gitpr.branches.local_branch import LocalBranch

TRUNK_BRANCH = "trunk"

# "remotes/origin/HEAD -> origin/trunk" names a symbolic ref, not a branch
_SYMBOLIC_REF_ARROW = " -> "


class SuffixPolicy(Enum):
    """Characters allowed in the identifier suffix of a PR branch."""

    HEX = "hex"
    DECIMAL = "decimal"

    @property
    def regex(self) -> str:
        if self is SuffixPolicy.DECIMAL:
            return r"[0-9]+"
        return r"[0-9a-f]+"


@dataclass(frozen=True)
class PrPattern:
    """Which remote branches denote pull requests.

    Attributes:
        remote: Only branches on this remote count; None accepts any remote
        suffix: Characters allowed in the trailing identifier segment
    """

    remote: str | None
    suffix: SuffixPolicy

    def compiled(self) -> re.Pattern[str]:
        return _compile_pr_pattern(self)


DEFAULT_PR_PATTERN = PrPattern(remote=None, suffix=SuffixPolicy.HEX)


@functools.lru_cache(maxsize=None)
def _compile_pr_pattern(pattern: PrPattern) -> re.Pattern[str]:
    remote = r"[^/]+" if pattern.remote is None else re.escape(pattern.remote)
    return re.compile(
        rf"^\s*(?:\*\s*)?remotes/{remote}/(?P<name>.+)/{pattern.suffix.regex}\s*\Z"
    )


def extract_pr_names(branches: str, pattern: PrPattern = DEFAULT_PR_PATTERN) -> list[str]:
    """Search ``git branch -a`` output for branches matching the PR schema.

    Given output like::

          cool-branch
        * trunk
          remotes/origin/new-idea/5e
          remotes/origin/hotfix/0

    this returns ``["new-idea", "hotfix"]``. PR names may contain slashes:
    ``remotes/origin/a/b/c/ffaa`` yields ``a/b/c``.

    Args:
        branches: Output of ``git branch -a``
        pattern: Remote and suffix rules; defaults to any remote, hex suffix

    Returns:
        PR names in listing order. Duplicates (the same PR seen through two
        remotes) are kept.
    """
    regex = pattern.compiled()
    pr_names: list[str] = []
    for line in branches.splitlines():
        if _SYMBOLIC_REF_ARROW in line:
            continue
        match = regex.match(line)
        if match is not None:
            pr_names.append(match.group("name"))
    return pr_names


def deletable_branch_names(
    merged_branches: Iterable[LocalBranch], trunk: str = TRUNK_BRANCH
) -> list[str]:
    """Select merged branches that are safe to delete.

    Excludes the checked-out branch and the trunk branch itself.
    """
    return [
        branch.name.value
        for branch in merged_branches
        if not branch.is_head and branch.name.value != trunk
    ]


def extract_deletable_branches(merged_branches: str, trunk: str = TRUNK_BRANCH) -> list[str]:
    """Parse ``git branch --merged`` output and select deletable branches.

    Example:
        >>> extract_deletable_branches("  one\\n* two\\n  trunk\\n  three\\n")
        ['one', 'three']
    """
    return deletable_branch_names(ListOf.parse(merged_branches, LocalBranch.parse), trunk)


def filter_remote_branches(
    pr_name: str,
    remote_branches: str,
    *,
    remote: str,
    suffix: SuffixPolicy = SuffixPolicy.HEX,
) -> list[str]:
    """Find the branches on one remote that belong to a PR.

    Args:
        pr_name: PR name to look for
        remote_branches: Output of ``git branch -r`` (``origin/name/abc123``)
        remote: Remote whose branches are considered
        suffix: Characters allowed in the trailing identifier segment

    Returns:
        Branch names without the remote prefix, ready for ``git push --delete``
    """
    regex = re.compile(
        rf"^{re.escape(remote)}/(?P<branch>{re.escape(pr_name)}/{suffix.regex})\Z"
    )
    selected: list[str] = []
    for line in remote_branches.splitlines():
        match = regex.match(line.strip())
        if match is not None:
            selected.append(match.group("branch"))
    return selected


def filter_local_branches(
    pr_name: str,
    local_branches: Iterable[LocalBranch],
    *,
    suffix: SuffixPolicy = SuffixPolicy.HEX,
) -> list[str]:
    """Find the local branches that belong to a PR."""
    regex = re.compile(rf"{re.escape(pr_name)}/{suffix.regex}")
    return [
        branch.name.value for branch in local_branches if regex.fullmatch(branch.name.value)
    ]
