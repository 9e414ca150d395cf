"""Filesystem-like branch names.

The only question we ask of a branch name is whether it looks like it
belongs to a pull request. That is the one thing local and remote branches
have in common.
"""

import re
from dataclasses import dataclass

# A PR branch ends in "/<hex>", e.g. "pr/naming/schema/123abc"
_ENDS_WITH_HEX = re.compile(r"/[0-9a-f]+\Z")


@dataclass(frozen=True)
class BranchName:
    """A slash-delimited branch name such as ``remotes/origin/feature/1a2b3c``."""

    value: str

    @classmethod
    def parse(cls, text: str) -> "BranchName":
        """Wrap any string as a BranchName. Never fails."""
        return cls(value=text)

    def looks_like_pr(self) -> bool:
        """Does the name match our ``pr/naming/schema/123abc`` convention?"""
        return _ENDS_WITH_HEX.search(self.value) is not None

    def __str__(self) -> str:
        return self.value
