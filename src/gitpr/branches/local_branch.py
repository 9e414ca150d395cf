"""Parse lines of ``git branch`` output into local branch records."""

from dataclasses import dataclass

from gitpr.branches.branch_name import BranchName

HEAD_MARKER = "*"


class MissingNameError(ValueError):
    """A branch listing line did not contain a branch name."""

    def __init__(self, line: str) -> None:
        super().__init__(f"missing branch name in line: {line!r}")
        self.line = line


@dataclass(frozen=True)
class LocalBranch:
    """One line of ``git branch`` / ``git branch --merged`` output.

    Attributes:
        name: The branch name
        is_head: True if git marked this as the checked-out branch
    """

    name: BranchName
    is_head: bool

    @classmethod
    def parse(cls, line: str) -> "LocalBranch":
        """Parse a line like ``"  branch/name"`` or ``"* branch/name"``.

        Raises:
            MissingNameError: If the line holds no branch name
        """
        tokens = line.split()
        if not tokens:
            raise MissingNameError(line)

        if tokens[0] == HEAD_MARKER:
            if len(tokens) < 2:
                raise MissingNameError(line)
            return cls(name=BranchName.parse(tokens[1]), is_head=True)

        return cls(name=BranchName.parse(tokens[0]), is_head=False)

    def looks_like_pr(self) -> bool:
        return self.name.looks_like_pr()
