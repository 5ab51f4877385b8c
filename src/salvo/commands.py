from dataclasses import dataclass

from .coord_utils import format_coord, parse_coordinate
from .grid import TrackingGrid


class CommandParseError(Exception):
    """Raised when a line cannot be parsed as a valid command."""


class AlreadyTargetedError(Exception):
    """Raised when a well-formed coordinate was already fired upon."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Already targeted: {format_coord(row, col)}")
        self.row = row
        self.col = col


@dataclass(frozen=True)
class FireCommand:
    row: int
    col: int


def parse_command(line: str) -> FireCommand:
    if line is None:
        raise CommandParseError("No command to parse")
    try:
        row, col = parse_coordinate(line)
    except ValueError as e:
        raise CommandParseError(str(e)) from e
    return FireCommand(row=row, col=col)


def check_untargeted(tracking: TrackingGrid, cmd: FireCommand) -> FireCommand:
    """Return *cmd* unchanged, or raise AlreadyTargetedError if its cell is marked."""
    if tracking.is_targeted(cmd.row, cmd.col):
        raise AlreadyTargetedError(cmd.row, cmd.col)
    return cmd
