"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """Content of a single board cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def is_occupied(self) -> bool:
        return self is not Cell.EMPTY

    def __str__(self) -> str:
        return " " if self is Cell.EMPTY else self.name


class Player(IntEnum):
    """Side to move. Values mirror the mark each player places."""

    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def mark(self) -> Cell:
        return Cell(self.value)

    @property
    def other(self) -> Player:
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1

    @property
    def display_name(self) -> str:
        return f"Player {self.value} ({self.mark!s})"

    @property
    def winning_state(self) -> GameState:
        return (
            GameState.PLAYER1_WON if self is Player.PLAYER1 else GameState.PLAYER2_WON
        )

    @classmethod
    def from_mark(cls, mark: Cell) -> Player:
        """Player owning *mark*, e.g. ``Cell.O`` → ``PLAYER2``."""
        if mark is Cell.EMPTY:
            raise ValueError("Empty cell has no owner")
        return cls(int(mark))

    def __str__(self) -> str:
        return self.display_name


class GameState(IntEnum):
    """Outcome of a game. Everything except IN_PROGRESS is terminal."""

    IN_PROGRESS = 0
    PLAYER1_WON = 1
    PLAYER2_WON = 2
    DRAW = 3

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.IN_PROGRESS

    @property
    def winner(self) -> Player | None:
        if self is GameState.PLAYER1_WON:
            return Player.PLAYER1
        if self is GameState.PLAYER2_WON:
            return Player.PLAYER2
        return None
