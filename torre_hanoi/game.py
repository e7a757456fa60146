"""The Tower of Hanoi game state and rules."""

from __future__ import annotations

import math

from .peg import Peg

NUM_PEGS = 3

_EVEN_PAIRS = ((0, 1), (0, 2), (1, 2))
_ODD_PAIRS = ((0, 2), (0, 1), (1, 2))


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules of the game."""


class HanoiGame:
    """Three pegs, a number of discs and a move counter."""

    def __init__(self, num_discs: int) -> None:
        self.reset(num_discs)

    def reset(self, num_discs: int | None = None) -> None:
        """Put every disc back on the first peg and zero the move counter."""
        if num_discs is None:
            num_discs = self.num_discs
        if num_discs < 0:
            raise ValueError("number of discs cannot be negative")
        self.num_discs = num_discs
        self.moves = 0
        self.pegs = [Peg(range(num_discs, 0, -1))] + [Peg() for _ in range(NUM_PEGS - 1)]

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < NUM_PEGS:
            raise IllegalMoveError(f"no such peg: {index}")

    def move(self, source: int, target: int) -> None:
        """Move the top disc of one peg to another, counting the move."""
        self._check_index(source)
        self._check_index(target)
        origin = self.pegs[source]
        if origin.is_empty():
            raise IllegalMoveError(f"peg {source} is empty")
        disc = origin.pop()
        destination = self.pegs[target]
        if not destination.is_empty() and destination.top() < disc:
            origin.push(disc)
            raise IllegalMoveError(f"disc {disc} cannot go on a smaller disc")
        destination.push(disc)
        self.moves += 1

    def is_won(self) -> bool:
        """True when all discs sit on the second or third peg."""
        first, second, third = self.pegs
        if not first.is_empty():
            return False
        if second.is_empty() and len(third) == self.num_discs:
            return True
        return third.is_empty() and len(second) == self.num_discs

    def next_optimal_move(self) -> tuple[int, int]:
        """Return the (source, target) pair of the next move of the optimal solution."""
        pairs = _EVEN_PAIRS if self.num_discs % 2 == 0 else _ODD_PAIRS
        first, second = pairs[self.moves % 3]
        top_first = math.inf if self.pegs[first].is_empty() else self.pegs[first].top()
        top_second = math.inf if self.pegs[second].is_empty() else self.pegs[second].top()
        if top_first < top_second:
            return first, second
        return second, first

    def render(self) -> str:
        """Draw the board as text."""
        width = self.num_discs * 2 + 3
        rod_padding = " " * ((width - 1) // 2)
        lines = ["", " Torre de Hanoi ", f"Movimentos: {self.moves}", ""]
        height = max(len(peg) for peg in self.pegs)
        stacks = [list(peg) for peg in self.pegs]
        for level in range(height, 0, -1):
            row = []
            for stack in stacks:
                if level <= len(stack):
                    size = stack[level - 1]
                    padding = " " * ((width - (size * 2 + 3)) // 2)
                    bar = "=" * size
                    row.append(f"{padding}({bar}{size}{bar}){padding}  ")
                else:
                    row.append(f"{rod_padding}|{rod_padding}  ")
            lines.append("".join(row))
        lines.append(("-" * width + "  ") * NUM_PEGS)
        lines.append(
            "".join(f"{rod_padding}{chr(ord('A') + index)}{rod_padding}  " for index in range(NUM_PEGS))
        )
        return "\n".join(lines) + "\n"