"""Error kinds raised by the rules engine and the input validator.

Every error carries a :class:`ErrorKind`.  The kind is a class attribute, so
it stays identifiable however much context is added to the message::

    try:
        game.apply_move(1, 1)
    except TicTacToeError as exc:
        if exc.kind is ErrorKind.CELL_OCCUPIED:
            ...
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ErrorKind(IntEnum):
    """Closed set of error classifications."""

    INVALID_RANGE = 1
    INVALID_FORMAT = 2
    INCOMPLETE_INPUT = 3
    CELL_OCCUPIED = 4
    GAME_OVER = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_RANGE: "Invalid position. Row and column must be between 0 and 2",
    ErrorKind.INVALID_FORMAT: "Invalid input format. Please enter numeric values only",
    ErrorKind.INCOMPLETE_INPUT: (
        "Incomplete input. Please enter two numbers separated by space"
    ),
    ErrorKind.CELL_OCCUPIED: "Position already occupied. Please choose an empty cell",
    ErrorKind.GAME_OVER: "The game is over. No further moves are accepted",
}


class TicTacToeError(ValueError):
    """Base class for every classified error.

    Args:
        detail: Optional context appended to the kind's message, e.g. the
            offending token.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = self.kind.message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidRangeError(TicTacToeError):
    kind = ErrorKind.INVALID_RANGE


class InvalidFormatError(TicTacToeError):
    kind = ErrorKind.INVALID_FORMAT


class IncompleteInputError(TicTacToeError):
    kind = ErrorKind.INCOMPLETE_INPUT


class CellOccupiedError(TicTacToeError):
    kind = ErrorKind.CELL_OCCUPIED


class GameOverError(TicTacToeError):
    """Raised when a move is submitted after the game has ended."""

    kind = ErrorKind.GAME_OVER


ERROR_TYPES: dict[ErrorKind, type[TicTacToeError]] = {
    cls.kind: cls
    for cls in (
        InvalidRangeError,
        InvalidFormatError,
        IncompleteInputError,
        CellOccupiedError,
        GameOverError,
    )
}
