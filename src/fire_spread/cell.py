"""Cell states for the forest fire cellular automaton."""

from enum import Enum


class CellState(Enum):
    """Possible states of a forest cell."""
    Empty = 0
    Tree = 1
    Burning = 2

    def __str__(self) -> str:
        return self.name
