"""Core domain layer — pure tic-tac-toe rules with zero external dependencies.

Quick start::

    from tictactoe.core import new_game

    game = new_game()
    game = game.apply_move(1, 1)   # X takes the centre
    game = game.apply_move(0, 0)   # O answers in the corner
    print(game.board)
"""

from tictactoe.core.board import Board
from tictactoe.core.enums import Cell, GameState, Player
from tictactoe.core.errors import (
    ERROR_TYPES,
    CellOccupiedError,
    ErrorKind,
    GameOverError,
    IncompleteInputError,
    InvalidFormatError,
    InvalidRangeError,
    TicTacToeError,
)
from tictactoe.core.game import Game, attempt_move, new_game
from tictactoe.core.rules import Rules
from tictactoe.core.types import (
    BOARD_SIZE,
    MAX_COORDINATE,
    MIN_COORDINATE,
    WIN_LINES,
    Coord,
    all_coords,
    is_valid_coord,
)

__all__ = [
    # Enums
    "Cell",
    "GameState",
    "Player",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "MAX_COORDINATE",
    "MIN_COORDINATE",
    "WIN_LINES",
    "all_coords",
    "is_valid_coord",
    # Errors
    "ERROR_TYPES",
    "CellOccupiedError",
    "ErrorKind",
    "GameOverError",
    "IncompleteInputError",
    "InvalidFormatError",
    "InvalidRangeError",
    "TicTacToeError",
    # Domain objects
    "Board",
    "Game",
    "Rules",
    "attempt_move",
    "new_game",
]
