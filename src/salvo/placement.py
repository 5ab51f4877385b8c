"""Random, collision-free fleet placement onto a ``Grid``.

The random source is injectable: anything with a ``randint(a, b)`` method
works, so ``random.Random(seed)`` gives reproducible games and tests can pass
an object that replays a fixed list of draws.
"""

from __future__ import annotations

import logging
import random
from typing import List, Set, Tuple

from . import config as _cfg
from .grid import Cell, Grid

logger = logging.getLogger(__name__)

HORIZONTAL = 0
VERTICAL = 1


class PlacementError(Exception):
    """Raised when a ship could not be placed within the attempt cap."""


def can_place_ship(grid: Grid, row: int, col: int, ship_size: int, orientation: int) -> bool:
    """Return `True` if a ship of *ship_size* fits at (*row*,*col*)."""
    if orientation == HORIZONTAL:
        if col + ship_size > grid.size:
            return False
        for c in range(col, col + ship_size):
            if grid.get(row, c) is not Cell.WATER:
                return False
    else:
        if row + ship_size > grid.size:
            return False
        for r in range(row, row + ship_size):
            if grid.get(r, col) is not Cell.WATER:
                return False
    return True


def do_place_ship(grid: Grid, row: int, col: int, ship_size: int, orientation: int) -> Set[Tuple[int, int]]:
    """Mutating helper that writes ship cells into *grid* and returns the occupied set."""
    occupied = set()
    if orientation == HORIZONTAL:
        for c in range(col, col + ship_size):
            grid.set(row, c, Cell.SHIP)
            occupied.add((row, c))
    else:
        for r in range(row, row + ship_size):
            grid.set(r, col, Cell.SHIP)
            occupied.add((r, col))
    return occupied


def place_ships_randomly(
    grid: Grid,
    ships=None,
    *,
    rng=None,
    max_attempts: int | None = None,
) -> List[Set[Tuple[int, int]]]:
    """Randomly position *ships* on *grid* without collisions.

    Each attempt draws a start row, a start column and an orientation, in that
    order, and is committed as soon as it fits.  Returns the occupied cells of
    every ship in placement order.
    """
    ships = ships if ships is not None else _cfg.FLEET
    rng = rng if rng is not None else random.Random(_cfg.SEED)
    max_attempts = max_attempts if max_attempts is not None else _cfg.PLACEMENT_ATTEMPTS

    placed: List[Set[Tuple[int, int]]] = []
    for ship_name, ship_size in ships:
        for attempt in range(1, max_attempts + 1):
            row = rng.randint(0, grid.size - 1)
            col = rng.randint(0, grid.size - 1)
            orientation = rng.randint(0, 1)
            if can_place_ship(grid, row, col, ship_size, orientation):
                placed.append(do_place_ship(grid, row, col, ship_size, orientation))
                logger.debug(
                    "Placed %s (size %d) at (%d,%d) %s after %d attempt(s)",
                    ship_name,
                    ship_size,
                    row,
                    col,
                    "H" if orientation == HORIZONTAL else "V",
                    attempt,
                )
                break
        else:
            raise PlacementError(f"Could not place {ship_name} (size {ship_size}) in {max_attempts} attempts")
    return placed
