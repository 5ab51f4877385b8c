"""Two-player hot-seat game session.

The class in this module runs a *single* match between two players sharing
one console.  It owns both players' grids and drives the turn state machine:

    SETUP ──► PLAYER1_TURN ◄──► PLAYER2_TURN ──► GAME_OVER

Player input
------------
<coord>   Fire at the given coordinate, column letter then row number (e.g. B5)

Output
------
Player N's turn:    Banner, followed by the attacker's tracking grid.
HIT! / MISS!        Outcome of the accepted shot.
Invalid input, try again.          Malformed coordinate; the prompt repeats.
You already shot here, try again.  Coordinate already marked; the prompt repeats.
Game Over!          Followed by the winner line when there is one.

Console I/O is injected (``readline`` behaves like ``input()``, ``write``
receives one line of text), so the session itself never touches stdin.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, List

from . import config as _cfg
from .commands import (
    AlreadyTargetedError,
    CommandParseError,
    FireCommand,
    check_untargeted,
    parse_command,
)
from .coord_utils import format_coord
from .events import Category, Event
from .grid import Grid, TrackingGrid
from .io_utils import grid_rows
from .placement import place_ships_randomly
from .shots import fire_at

logger = logging.getLogger(__name__)

PROMPT = "Enter target (for example A5): "
MSG_HIT = "HIT!"
MSG_MISS = "MISS!"
MSG_INVALID = "Invalid input, try again."
MSG_DUPLICATE = "You already shot here, try again."
MSG_GAME_OVER = "Game Over!"


class Phase(Enum):
    SETUP = auto()
    PLAYER1_TURN = auto()
    PLAYER2_TURN = auto()
    GAME_OVER = auto()


_TURN_PHASE = {1: Phase.PLAYER1_TURN, 2: Phase.PLAYER2_TURN}


@dataclass
class Player:
    """One seat at the table: own fleet, own view of the opponent, shot tally."""

    number: int
    grid: Grid = field(default_factory=Grid)
    tracking: TrackingGrid = field(default_factory=TrackingGrid)
    shots: int = 0
    hits: int = 0

    @property
    def name(self) -> str:
        return f"Player {self.number}"


class GameSession:
    """State machine managing a full two-player match."""

    def __init__(
        self,
        readline: Callable[[str], str],
        write: Callable[[str], None],
        *,
        rng=None,
        ships=None,
        max_attempts: int | None = None,
    ):
        """Create a session in the SETUP phase.

        Args:
            readline: input collaborator; called with the prompt, returns one
                line, raises EOFError when no more input will arrive.
            write: output collaborator; receives one line of text per call.
            rng: random source for fleet placement (``randint(a, b)``),
                shared by both fleets. Defaults to ``random.Random(SEED)``.
            ships/max_attempts: forwarded to ``place_ships_randomly``.
        """
        self._readline = readline
        self._write = write
        self._rng = rng if rng is not None else random.Random(_cfg.SEED)
        self._ships = ships
        self._max_attempts = max_attempts

        self.players: Dict[int, Player] = {1: Player(1), 2: Player(2)}
        self.phase = Phase.SETUP
        # Whose turn it is (1 or 2); set in setup()
        self.current: int | None = None

        # Result, filled in when the phase reaches GAME_OVER
        self.winner: int | None = None
        self.win_reason: str | None = None

        self._subs: List[Callable[[Event], None]] = []

    # -------------------- event bus --------------------
    def subscribe(self, cb: Callable[[Event], None]) -> None:
        """Allow external components (logger, tests) to receive game events."""
        self._subs.append(cb)

    def _emit(self, ev: Event) -> None:
        for cb in tuple(self._subs):
            try:
                cb(ev)
            except Exception:  # noqa: BLE001
                logger.exception("Event subscriber failed for %s", ev)

    # -------------------- lifecycle --------------------
    def setup(self) -> None:
        """Place both fleets and hand the first turn to Player 1."""
        if self.phase is not Phase.SETUP:
            raise RuntimeError(f"setup() called in phase {self.phase.name}")
        for player in self.players.values():
            place_ships_randomly(
                player.grid,
                self._ships,
                rng=self._rng,
                max_attempts=self._max_attempts,
            )
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s fleet:\n%s", player.name, "\n".join(grid_rows(player.grid)))
        self._emit(Event(Category.TURN, "start", {"ships": self.players[1].grid.ships_remaining()}))
        self._enter_turn(1)

    def run(self) -> int | None:
        """Play from the current phase until GAME_OVER and return the winner (if any)."""
        if self.phase is Phase.SETUP:
            self.setup()
        while self.phase is not Phase.GAME_OVER:
            self.play_turn()
        return self.winner

    def is_over(self) -> bool:
        """True once either fleet has no undamaged segment left."""
        return any(p.grid.all_ships_sunk() for p in self.players.values())

    def opponent_of(self, number: int) -> Player:
        return self.players[2 if number == 1 else 1]

    # -------------------- gameplay --------------------
    def play_turn(self) -> None:
        """Run one complete turn: prompt, validate, resolve, check, swap."""
        if self.phase not in (Phase.PLAYER1_TURN, Phase.PLAYER2_TURN):
            raise RuntimeError(f"play_turn() called in phase {self.phase.name}")
        attacker = self.players[self.current]
        defender = self.opponent_of(attacker.number)

        # 1) Show the attacker what they know so far
        self._write(f"{attacker.name}'s turn:")
        for line in grid_rows(attacker.tracking):
            self._write(line)
        self._emit(Event(Category.TURN, "prompt", {"player": attacker.number}))

        # 2) Block until a legal command arrives
        try:
            cmd = self._await_command(attacker)
        except EOFError:
            logger.warning("Input closed during %s's turn – aborting match", attacker.name)
            self.abort()
            return

        # 3) Resolve the shot
        result = fire_at(defender.grid, attacker.tracking, cmd.row, cmd.col)
        attacker.shots += 1
        if result == "hit":
            attacker.hits += 1
        self._write(MSG_HIT if result == "hit" else MSG_MISS)
        remaining = defender.grid.ships_remaining()
        self._emit(
            Event(
                Category.TURN,
                "shot",
                {
                    "attacker": attacker.number,
                    "coord": format_coord(cmd.row, cmd.col),
                    "result": result,
                    "remaining": remaining,
                },
            )
        )

        # 4) Victory is checked after every single shot
        if self.is_over():
            self._conclude(attacker.number, reason="fleet destroyed")
            return

        # 5) Swap turns
        self._enter_turn(defender.number)

    def abort(self, reason: str = "aborted") -> None:
        """End the match without a winner (input closed, interrupted)."""
        if self.phase is Phase.GAME_OVER:
            return
        self._emit(Event(Category.SYSTEM, "aborted", {"player": self.current, "reason": reason}))
        self._conclude(None, reason=reason)

    # -------------------- internal utilities --------------------
    def _enter_turn(self, number: int) -> None:
        self.current = number
        self.phase = _TURN_PHASE[number]
        logger.debug("Phase -> %s", self.phase.name)

    def _await_command(self, attacker: Player) -> FireCommand:
        while True:
            line = self._readline(PROMPT)
            try:
                return check_untargeted(attacker.tracking, parse_command(line))
            except CommandParseError as e:
                logger.debug("%s sent malformed input: %s", attacker.name, e)
                self._write(MSG_INVALID)
                reason = "invalid"
            except AlreadyTargetedError as e:
                logger.debug("%s repeated a shot: %s", attacker.name, e)
                self._write(MSG_DUPLICATE)
                reason = "duplicate"
            self._emit(Event(Category.SYSTEM, "rejected", {"player": attacker.number, "reason": reason, "raw": line}))

    def _conclude(self, winner: int | None, *, reason: str) -> None:
        logger.debug("_conclude: winner=%s, reason=%s", winner, reason)
        self.phase = Phase.GAME_OVER
        self.winner = winner
        self.win_reason = reason
        self._write(MSG_GAME_OVER)
        shots = 0
        if winner is not None:
            shots = self.players[winner].shots
            self._write(f"Player {winner} wins with {shots} shots.")
        self._emit(Event(Category.TURN, "end", {"winner": winner, "reason": reason, "shots": shots}))
