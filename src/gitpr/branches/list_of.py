"""A "list of T" parsed from lines of text.

Given a per-line parser for T and multi-line source text, ListOf produces an
iterable container of T. Lines the parser rejects (by raising ValueError) are
dropped: header and separator lines in git listings are expected and must not
abort processing.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ListOf(Generic[T]):
    """Ordered, single-pass sequence of records parsed from text.

    Records come out in source line order. Iteration consumes the records;
    re-iterating requires parsing the source text again.
    """

    def __init__(self, records: list[T]) -> None:
        self._storage: deque[T] = deque(records)

    @classmethod
    def parse(cls, text: str, parse_line: Callable[[str], T]) -> ListOf[T]:
        """Parse every line of text, keeping only the lines that parse.

        Args:
            text: Multi-line source text
            parse_line: Parser for a single line; raises ValueError to reject it

        Returns:
            ListOf holding the successfully parsed records (possibly none)
        """
        records: list[T] = []
        for line in text.splitlines():
            try:
                records.append(parse_line(line))
            except ValueError:
                continue
        return cls(records)

    def __iter__(self) -> ListOf[T]:
        return self

    def __next__(self) -> T:
        if not self._storage:
            raise StopIteration
        return self._storage.popleft()

    def __len__(self) -> int:
        """Number of records not yet consumed."""
        return len(self._storage)
