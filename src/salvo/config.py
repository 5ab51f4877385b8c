"""Central configuration for runtime-tunable parameters.

Board dimensions and fleet composition are fixed.  The remaining knobs can be
overridden via environment variables so that a reproducible game (fixed seed)
or a chatty debug run does not need code changes.  The CLI flags in
``salvo.game`` take precedence over these values.
"""

from __future__ import annotations

import os

# ===========================================================================
# Game Constants
# ===========================================================================
# Width and height of every grid. Not overridable.
BOARD_SIZE: int = 10

# Fleet roster: list of (name, length) tuples, placed in this order.
FLEET = [
    ("Carrier", 5),
    ("Battleship", 4),
    ("Cruiser", 3),
    ("Destroyer", 2),
]


# ===========================================================================
# Ship Placement
# ===========================================================================
# SALVO_SEED: Integer seed for the placement random source.
#   Defaults to unset (fresh OS entropy every game).
#   Example: export SALVO_SEED=1234
SEED: int | None = int(os.environ["SALVO_SEED"]) if os.getenv("SALVO_SEED") else None

# SALVO_PLACEMENT_ATTEMPTS: Upper bound on sampled placements per ship before
#   placement is declared impossible and PlacementError is raised.
#   Defaults to 10000, far above anything a 10x10 board needs.
#   Example: export SALVO_PLACEMENT_ATTEMPTS=500
PLACEMENT_ATTEMPTS: int = int(os.getenv("SALVO_PLACEMENT_ATTEMPTS", "10000"))


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# SALVO_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export SALVO_DEBUG=1
DEBUG: bool = os.getenv("SALVO_DEBUG", "0") == "1"

# Format shared by every log handler the CLI installs.
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
