import pytest

from salvo.commands import (
    parse_command,
    check_untargeted,
    FireCommand,
    CommandParseError,
    AlreadyTargetedError,
)
from salvo.coord_utils import format_coord, parse_coordinate
from salvo.grid import Mark, TrackingGrid


def test_fire_valid_A1():
    cmd = parse_command("A1")
    assert isinstance(cmd, FireCommand)
    assert (cmd.row, cmd.col) == (0, 0)


def test_fire_valid_J10():
    cmd = parse_command("J10")
    assert isinstance(cmd, FireCommand)
    assert (cmd.row, cmd.col) == (9, 9)


@pytest.mark.parametrize(
    "coord,expected",
    [
        ("A5", (4, 0)),
        ("C7", (6, 2)),
        ("J1", (0, 9)),
        ("A10", (9, 0)),
        ("E01", (0, 4)),
    ],
)
def test_letter_is_column_number_is_row(coord, expected):
    assert parse_coordinate(coord) == expected


@pytest.mark.parametrize(
    "line",
    [
        "",
        "A",
        "1",
        "K1",  # column past J
        "A0",
        "A11",
        "A100",
        "AA",
        "A1B",
        "1A",
        "a1",
        " A1",
        "A1 ",
        "A-1",
        "A+1",
        "A١",  # non-ASCII digit
        "A1\n",
        "FIRE A1",
    ],
)
def test_malformed_coordinates_rejected(line):
    with pytest.raises(CommandParseError):
        parse_command(line)


@pytest.mark.parametrize("word", ["QUIT", "  quit ", "quit", "EXIT"])
def test_command_words_are_not_coordinates(word):
    with pytest.raises(CommandParseError):
        parse_command(word)


def test_none_line():
    with pytest.raises(CommandParseError):
        parse_command(None)


def test_check_untargeted_passes_fresh_cell():
    tracking = TrackingGrid()
    cmd = FireCommand(row=2, col=3)
    assert check_untargeted(tracking, cmd) is cmd


@pytest.mark.parametrize("mark", [Mark.HIT, Mark.MISS])
def test_check_untargeted_rejects_marked_cell(mark):
    tracking = TrackingGrid()
    tracking.set(2, 3, mark)
    with pytest.raises(AlreadyTargetedError) as excinfo:
        check_untargeted(tracking, FireCommand(row=2, col=3))
    assert "D3" in str(excinfo.value)
    assert (excinfo.value.row, excinfo.value.col) == (2, 3)


def test_format_coord():
    assert format_coord(0, 0) == "A1"
    assert format_coord(9, 9) == "J10"
    assert format_coord(4, 1) == "B5"
