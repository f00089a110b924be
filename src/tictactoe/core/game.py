"""Immutable game value and its single transition, :meth:`Game.apply_move`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from tictactoe.core.board import Board
from tictactoe.core.enums import GameState, Player
from tictactoe.core.errors import (
    CellOccupiedError,
    GameOverError,
    InvalidRangeError,
    TicTacToeError,
)
from tictactoe.core.rules import Rules
from tictactoe.core.types import is_valid_coord

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Game:
    """Complete game context: board, side to move, outcome and move count.

    ``move_count`` always equals the number of occupied cells.  Once
    ``state`` is terminal the value is frozen: ``current_player`` keeps the
    last mover (the winner, for a won game).
    """

    board: Board = field(default_factory=Board.empty)
    current_player: Player = Player.PLAYER1
    state: GameState = GameState.IN_PROGRESS
    move_count: int = 0

    def __post_init__(self) -> None:
        occupied = self.board.count_occupied()
        if self.move_count != occupied:
            raise ValueError(
                f"move_count {self.move_count} does not match {occupied} occupied cells"
            )

    @classmethod
    def new(cls) -> Game:
        return cls()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    @property
    def winner(self) -> Player | None:
        return self.state.winner

    # ── Transition ───────────────────────────────────────────────────────

    def apply_move(self, row: int, col: int) -> Game:
        """Place the current player's mark at (*row*, *col*).

        Checks run in order and the first failure is raised:

        1. :class:`GameOverError` if the game already ended.
        2. :class:`InvalidRangeError` if a coordinate is outside 0–2.
        3. :class:`CellOccupiedError` if the target cell holds a mark.

        Returns a new :class:`Game`; ``self`` is never modified.
        """
        if self.state.is_terminal:
            _LOGGER.debug(
                "Move (%d, %d) rejected: game already %s", row, col, self.state.name
            )
            raise GameOverError(self.state.name)
        if not is_valid_coord(row, col):
            _LOGGER.debug("Move (%d, %d) rejected: out of range", row, col)
            raise InvalidRangeError(f"({row}, {col})")
        if not self.board.is_cell_empty(row, col):
            _LOGGER.debug("Move (%d, %d) rejected: cell occupied", row, col)
            raise CellOccupiedError(f"({row}, {col})")

        mover = self.current_player
        board = self.board.with_cell(row, col, mover.mark)
        state = Rules.outcome_after(board, mover)
        next_player = mover.other if state is GameState.IN_PROGRESS else mover

        if state.is_terminal:
            _LOGGER.debug(
                "Game finished: %s after %d moves", state.name, self.move_count + 1
            )

        return replace(
            self,
            board=board,
            current_player=next_player,
            state=state,
            move_count=self.move_count + 1,
        )


def new_game() -> Game:
    """Empty board, Player 1 to move, game in progress."""
    return Game.new()


def attempt_move(game: Game, row: int, col: int) -> tuple[Game, TicTacToeError | None]:
    """Value-returning form of :meth:`Game.apply_move`.

    On failure the *same* ``game`` object is returned alongside the error.
    """
    try:
        return game.apply_move(row, col), None
    except TicTacToeError as exc:
        return game, exc
