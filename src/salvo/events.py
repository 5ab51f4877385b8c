"""Lightweight event model used by GameSession to decouple game logic from its observers.

The session emits strongly-typed events that subscribers (the CLI's log
router, tests) can consume without parsing the player-facing text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class Category(Enum):
    """High-level event categories."""

    TURN = auto()  # per-turn lifecycle (start, prompt, shot, end)
    SYSTEM = auto()  # rejected input, aborted game


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable event emitted by GameSession."""

    category: Category
    type: str  # finer-grained identifier, e.g. "shot", "rejected"
    payload: Dict[str, Any]
