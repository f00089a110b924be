"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from tictactoe.core.enums import Player

if TYPE_CHECKING:
    from tictactoe.core.game import Game


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def player(self) -> Player: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def request_move(self, game: Game) -> None:
        """Begin the move-selection process.

        Human moves arrive asynchronously through the controller, so for
        them this is a no-op.
        """


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, player1: IPlayer, player2: IPlayer) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, row: int, col: int) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def submit_input(self, line: str) -> bool:
        """Validate a raw input line and submit it as a move."""
