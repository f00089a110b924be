"""GameController — the central orchestrator of a tic-tac-toe session.

Coordinates: Players, the immutable Game value, the input validator.
Emits events via simple callbacks so the CLI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.enums import GameState, Player
from tictactoe.core.errors import TicTacToeError
from tictactoe.core.game import Game, new_game
from tictactoe.game.interfaces import GamePhase, IGameController, IPlayer
from tictactoe.validation.input import parse_and_validate_input

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Game], None]  # game after the move
ErrorCallback = Callable[[TicTacToeError], None]
GameOverCallback = Callable[[GameState], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_error: list[ErrorCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the single mutable reference to the current :class:`Game`.

    Every accepted move replaces that reference with the engine's result;
    a rejected move leaves it untouched and the same player retries.
    """

    __slots__ = ("_game", "_players", "_phase", "events")

    def __init__(self) -> None:
        self._game = new_game()
        self._players: dict[Player, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def state(self) -> GameState:
        return self._game.state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_over(self) -> bool:
        return self._game.is_over

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._game.current_player)

    def player(self, player: Player) -> IPlayer | None:
        return self._players.get(player)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, player1: IPlayer, player2: IPlayer) -> None:
        self._players = {Player.PLAYER1: player1, Player.PLAYER2: player2}
        self._game = new_game()
        self._set_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, row: int, col: int) -> bool:
        try:
            game = self._game.apply_move(row, col)
        except TicTacToeError as exc:
            self._emit_error(exc)
            return False

        self._game = game
        self._emit_move()

        if game.is_over:
            self._set_phase(GamePhase.GAME_OVER)
            self._emit_game_over(game.state)
            return True

        self._prompt_current_player()
        return True

    def submit_input(self, line: str) -> bool:
        try:
            row, col = parse_and_validate_input(line)
        except TicTacToeError as exc:
            self._emit_error(exc)
            return False
        return self.submit_move(row, col)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        cp = self.current_player
        if cp is not None:
            cp.request_move(self._game)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        _LOGGER.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self) -> None:
        for cb in self.events.on_move:
            cb(self._game)

    def _emit_error(self, error: TicTacToeError) -> None:
        for cb in self.events.on_error:
            cb(error)

    def _emit_game_over(self, state: GameState) -> None:
        for cb in self.events.on_game_over:
            cb(state)
