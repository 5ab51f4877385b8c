"""Apply a single, already-validated shot to a pair of grids."""

from __future__ import annotations

import logging

from typing_extensions import Literal

from .grid import Cell, Grid, Mark, TrackingGrid

logger = logging.getLogger(__name__)

ShotResult = Literal["hit", "miss"]


def fire_at(opponent: Grid, tracking: TrackingGrid, row: int, col: int) -> ShotResult:
    """Process a shot at (*row*,*col*) and return ``"hit"`` or ``"miss"``.

    The caller guarantees the coordinate is in bounds and that *tracking* has
    not marked it yet.  A hit turns the opponent's ``S`` into ``X``; the
    tracking grid is marked in both cases.
    """
    if opponent.get(row, col) is Cell.SHIP:
        opponent.set(row, col, Cell.HIT_SHIP)
        tracking.set(row, col, Mark.HIT)
        result: ShotResult = "hit"
    else:
        tracking.set(row, col, Mark.MISS)
        result = "miss"
    logger.debug("fire_at(%d,%d) -> %s", row, col, result)
    return result
