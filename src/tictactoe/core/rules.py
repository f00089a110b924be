"""High-level tic-tac-toe rules: win, draw and outcome detection."""

from __future__ import annotations

from tictactoe.core.board import Board
from tictactoe.core.enums import Cell, GameState, Player
from tictactoe.core.types import WIN_LINES, Coord


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    All checks are independent of whose turn it is and always inspect the
    same eight lines.
    """

    @staticmethod
    def winning_line(board: Board, mark: Cell) -> tuple[Coord, Coord, Coord] | None:
        """First line fully occupied by *mark*, or ``None``."""
        if mark is Cell.EMPTY:
            return None
        for line in WIN_LINES:
            if all(cell is mark for cell in board.line(line)):
                return line
        return None

    @staticmethod
    def check_win(board: Board, mark: Cell) -> bool:
        return Rules.winning_line(board, mark) is not None

    @staticmethod
    def check_draw(board: Board) -> bool:
        """Board is full and neither mark owns a line."""
        if not board.is_full():
            return False
        return not (Rules.check_win(board, Cell.X) or Rules.check_win(board, Cell.O))

    @staticmethod
    def outcome_after(board: Board, mover: Player) -> GameState:
        """State after *mover* has just placed a mark on *board*.

        Only the mover can have completed a line, so the win check is made
        for that mark alone and precedes the full-board check.
        """
        if Rules.check_win(board, mover.mark):
            return mover.winning_state
        if board.is_full():
            return GameState.DRAW
        return GameState.IN_PROGRESS

    @staticmethod
    def game_result(board: Board) -> GameState:
        """Classify an arbitrary board without knowing who moved last."""
        if Rules.check_win(board, Cell.X):
            return GameState.PLAYER1_WON
        if Rules.check_win(board, Cell.O):
            return GameState.PLAYER2_WON
        if board.is_full():
            return GameState.DRAW
        return GameState.IN_PROGRESS
