"""Translate GameSession events into log records.

The router lives *outside* GameSession so that what gets logged is declared
in a single place and can evolve without touching core game logic.  It is
also straight-forward to unit-test by feeding synthetic Event objects.
"""

from __future__ import annotations

import logging

from .events import Event, Category

logger = logging.getLogger(__name__)


class EventRouter:
    """Session subscriber that converts `Event` → log records."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log if log is not None else logger

    # ------------------------------------------------------------------
    # Public dispatch entry
    # ------------------------------------------------------------------
    def __call__(self, ev: Event) -> None:  # GameSession calls router(event)
        try:
            self.dispatch(ev)
        except Exception:  # noqa: BLE001
            self._log.exception("Event routing failed for %s", ev)

    # ------------------------------------------------------------------
    # Internal dispatch
    # ------------------------------------------------------------------
    def dispatch(self, ev: Event) -> None:
        cat = ev.category
        if cat is Category.TURN:
            self._handle_turn(ev)
        elif cat is Category.SYSTEM:
            self._handle_system(ev)
        else:  # pragma: no cover – unknown category
            self._log.debug("Ignoring event %s", ev)

    # ------------------------------------------------------------------
    # Category handlers
    # ------------------------------------------------------------------
    def _handle_turn(self, ev: Event) -> None:
        t = ev.type
        p = ev.payload
        if t == "start":
            self._log.info("Match started – %d ship segments per fleet", p["ships"])
        elif t == "prompt":
            self._log.debug("Waiting for Player %d", p["player"])
        elif t == "shot":
            self._log.info(
                "Player %d fired at %s: %s (%d segments left)",
                p["attacker"],
                p["coord"],
                p["result"],
                p["remaining"],
            )
        elif t == "end":
            if p["winner"] is None:
                self._log.info("Match ended without a winner (%s)", p["reason"])
            else:
                self._log.info("Player %d won (%s) after %d shots", p["winner"], p["reason"], p["shots"])
        else:
            self._log.debug("Unhandled TURN event: %s", ev)

    def _handle_system(self, ev: Event) -> None:
        t = ev.type
        p = ev.payload
        if t == "rejected":
            self._log.debug("Rejected input from Player %d (%s): %r", p["player"], p["reason"], p["raw"])
        elif t == "aborted":
            self._log.warning("Match aborted during Player %s's turn", p["player"])
        else:
            self._log.debug("Unhandled SYSTEM event: %s", ev)
