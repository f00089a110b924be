"""Coordinate type alias, board dimensions and the winning lines.

Board layout (row, col), both zero-based::

      0   1   2
    0 . | . | .
    1 . | . | .
    2 . | . | .
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 3
MIN_COORDINATE = 0
MAX_COORDINATE = BOARD_SIZE - 1


def is_valid_coord(row: int, col: int) -> bool:
    """Whether (*row*, *col*) addresses a cell on the board."""
    return (
        MIN_COORDINATE <= row <= MAX_COORDINATE
        and MIN_COORDINATE <= col <= MAX_COORDINATE
    )


def all_coords() -> list[Coord]:
    """Every cell in row-major order."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Winning lines ───────────────────────────────────────────────────────────

ROW_LINES: tuple[tuple[Coord, Coord, Coord], ...] = tuple(
    ((r, 0), (r, 1), (r, 2)) for r in range(BOARD_SIZE)
)
COLUMN_LINES: tuple[tuple[Coord, Coord, Coord], ...] = tuple(
    ((0, c), (1, c), (2, c)) for c in range(BOARD_SIZE)
)
MAIN_DIAGONAL: tuple[Coord, Coord, Coord] = ((0, 0), (1, 1), (2, 2))
ANTI_DIAGONAL: tuple[Coord, Coord, Coord] = ((0, 2), (1, 1), (2, 0))

WIN_LINES: tuple[tuple[Coord, Coord, Coord], ...] = (
    *ROW_LINES,
    *COLUMN_LINES,
    MAIN_DIAGONAL,
    ANTI_DIAGONAL,
)
