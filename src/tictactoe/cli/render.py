"""Plain-text rendering of the board, error banners and results."""

from __future__ import annotations

import unicodedata

from tictactoe.core.board import Board
from tictactoe.core.errors import ErrorKind, TicTacToeError
from tictactoe.core.types import BOARD_SIZE

COLUMN_HEADER = "  0   1   2"
ROW_SEPARATOR = "  -----------"

_FRAME_WIDTH = 44

# Title and two hint lines for each user-facing error kind.
_BANNERS: dict[ErrorKind, tuple[str, str, str]] = {
    ErrorKind.INVALID_RANGE: (
        "❌ Invalid Position",
        "Row and column must be between 0 and 2",
        "Example: '1 1' for center position",
    ),
    ErrorKind.INVALID_FORMAT: (
        "❌ Invalid Format",
        "Please enter numeric values only",
        "Example: '0 2' or '1 1'",
    ),
    ErrorKind.INCOMPLETE_INPUT: (
        "❌ Incomplete Input",
        "Please enter two numbers separated by",
        "space (row and column)",
    ),
    ErrorKind.CELL_OCCUPIED: (
        "❌ Cell Already Occupied",
        "That position is already taken",
        "Please choose an empty cell",
    ),
}


def render_board(board: Board) -> str:
    """Board with column header, row labels and row separators."""
    lines = [COLUMN_HEADER]
    for r, row in enumerate(board.rows()):
        lines.append(f"{r} " + "|".join(f" {cell!s} " for cell in row))
        if r < BOARD_SIZE - 1:
            lines.append(ROW_SEPARATOR)
    return "\n".join(lines)


def _display_width(text: str) -> int:
    """Terminal columns taken by *text*; wide glyphs such as ❌ count twice."""
    return sum(2 if unicodedata.east_asian_width(ch) in "WF" else 1 for ch in text)


def _framed(lines: list[str]) -> str:
    top = "╔" + "═" * _FRAME_WIDTH + "╗"
    bottom = "╚" + "═" * _FRAME_WIDTH + "╝"
    inner = _FRAME_WIDTH - 2
    body = [
        f"║  {text}{' ' * max(0, inner - _display_width(text))}║" for text in lines
    ]
    return "\n".join([top, *body, bottom])


def render_error(error: TicTacToeError) -> str:
    """Framed banner naming the kind of *error*."""
    banner = _BANNERS.get(error.kind)
    if banner is None:
        return _framed(["❌ Error", "", str(error)])
    title, hint1, hint2 = banner
    return _framed([title, "", hint1, hint2])
