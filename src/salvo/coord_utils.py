import re
from typing import Tuple

from .config import BOARD_SIZE

LAST_COLUMN = chr(ord("A") + BOARD_SIZE - 1)

# Column letter A-J followed by one or two ASCII digits; range checked separately
COORD_RE = re.compile(rf"([A-{LAST_COLUMN}])([0-9]{{1,2}})")


def parse_coordinate(coord: str) -> Tuple[int, int]:
    """
    Convert a coordinate like 'A1' through 'J10' to a zero-based (row, col) tuple.

    The letter picks the column and the number picks the row, so 'C7' is
    (6, 2).  Raises ValueError for anything outside that grammar.
    """
    match = COORD_RE.fullmatch(coord)
    if match is None:
        raise ValueError(f"Invalid coordinate: {coord!r}")
    letter, digits = match.groups()
    number = int(digits)
    if not 1 <= number <= BOARD_SIZE:
        raise ValueError(f"Row out of range: {coord!r}")
    return number - 1, ord(letter) - ord("A")


def format_coord(row: int, col: int) -> str:
    """
    Convert zero-based (row, col) to coordinate string like 'A1'.
    """
    return f"{chr(ord('A') + col)}{row + 1}"
