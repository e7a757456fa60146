"""A peg holding a stack of discs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Peg:
    """A stack of discs identified by size; iteration runs bottom to top."""

    def __init__(self, discs: Iterable[int] = ()) -> None:
        self._discs: list[int] = list(discs)

    def push(self, size: int) -> None:
        """Place a disc on top of the peg."""
        self._discs.append(size)

    def pop(self) -> int:
        """Remove and return the top disc."""
        if not self._discs:
            raise IndexError("pop from an empty peg")
        return self._discs.pop()

    def top(self) -> int:
        """Return the top disc without removing it."""
        if not self._discs:
            raise IndexError("an empty peg has no top disc")
        return self._discs[-1]

    def is_empty(self) -> bool:
        return not self._discs

    def __len__(self) -> int:
        return len(self._discs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._discs)

    def __repr__(self) -> str:
        return f"Peg({self._discs!r})"