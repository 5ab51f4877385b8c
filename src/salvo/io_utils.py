# io_utils.py
"""
Console boundary helpers used by the CLI around GameSession
–––––––––––––––––––––––––––––––––––––––––––––––––––––––––––
• grid_rows()        – Grid/TrackingGrid → printable lines (header + one per row)
• console_readline() – one line from stdin; EOFError when stdin is closed
• console_write()    – one status line to stdout
"""

from typing import List
import logging

logger = logging.getLogger("salvo.io_utils")


def grid_rows(grid) -> List[str]:
    """Render *grid* as a column-letter header followed by numbered rows."""
    logger.debug("grid_rows() start – grid=%r", grid)
    header = "    " + " ".join(chr(ord("A") + c) for c in range(grid.size))
    rows: list[str] = [header]
    for r in range(grid.size):
        cells = " ".join(grid.get(r, c).value for c in range(grid.size))
        rows.append(f"{r + 1:2d}  {cells}")
    return rows


def console_readline(prompt: str = "") -> str:
    line = input(prompt)
    logger.debug("console_readline() got line %r", line)
    return line


def console_write(msg: str) -> None:
    print(msg, flush=True)
