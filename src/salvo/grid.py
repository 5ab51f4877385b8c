"""
grid.py

Storage for the two kinds of board every player owns:
 - Grid: the player's own fleet layout ('~' water, 'S' ship, 'X' hit ship)
 - TrackingGrid: what the player has learned about the opponent
   ('~' unknown, 'X' hit, '0' miss)

Both are plain fixed-size matrices.  Neither checks bounds; callers pass
indices that already went through coordinate validation or the placement
arithmetic.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

from .config import BOARD_SIZE


class Cell(str, Enum):
    """State of one cell on a fleet grid. The value doubles as its glyph."""

    WATER = "~"
    SHIP = "S"
    HIT_SHIP = "X"


class Mark(str, Enum):
    """State of one cell on a tracking grid. The value doubles as its glyph."""

    UNKNOWN = "~"
    HIT = "X"
    MISS = "0"


class _Matrix:
    """Shared N×N storage; subclasses pick the cell type and default."""

    default: Enum

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        self.cells = [[self.default for _ in range(size)] for _ in range(size)]

    def get(self, row: int, col: int):
        return self.cells[row][col]

    def set(self, row: int, col: int, state) -> None:
        self.cells[row][col] = state

    def count(self, state) -> int:
        """Return how many cells are currently in *state*."""
        return sum(1 for row in self.cells for cell in row if cell is state)

    def positions(self, state) -> Iterator[Tuple[int, int]]:
        """Yield every (row, col) whose cell is in *state*, row-major."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell is state:
                    yield (r, c)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"


class Grid(_Matrix):
    """A player's private fleet layout."""

    default = Cell.WATER

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def ships_remaining(self) -> int:
        """Number of undamaged ship segments left on this grid."""
        return self.count(Cell.SHIP)

    def all_ships_sunk(self) -> bool:
        return self.ships_remaining() == 0


class TrackingGrid(_Matrix):
    """A player's record of the shots they have taken at the opponent."""

    default = Mark.UNKNOWN

    def get(self, row: int, col: int) -> Mark:
        return self.cells[row][col]

    def is_targeted(self, row: int, col: int) -> bool:
        return self.cells[row][col] is not Mark.UNKNOWN

    def shots_taken(self) -> int:
        return self.size * self.size - self.count(Mark.UNKNOWN)
