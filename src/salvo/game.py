"""Console entrypoint: two players, one terminal, play until a fleet is gone.

Run with ``python -m salvo.game`` or the installed ``salvo`` script.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config as _cfg
from .io_utils import console_readline, console_write
from .placement import PlacementError
from .router import EventRouter
from .session import GameSession

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player console Battleship")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="store_true",
        help="Only log errors.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=_cfg.SEED,
        help="Seed the ship placement for a reproducible game.",
    )
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.quiet:
        return logging.ERROR
    if args.debug or _cfg.DEBUG:
        return logging.DEBUG
    if args.verbose >= 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Parse flags, configure logging and play one match. Returns the exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(args), format=_cfg.LOG_FORMAT)

    session = GameSession(console_readline, console_write, rng=random.Random(args.seed))
    session.subscribe(EventRouter())
    try:
        session.run()
    except PlacementError:
        logger.exception("Fleet placement failed")
        return 1
    except KeyboardInterrupt:
        console_write("")
        session.abort("interrupted")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
