"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tictactoe.core.enums import Player
from tictactoe.game.interfaces import IPlayer

if TYPE_CHECKING:
    from tictactoe.core.game import Game


class HumanPlayer(IPlayer):
    """A human participant — moves come from the terminal.

    ``request_move`` is a no-op because humans type their moves.
    """

    __slots__ = ("_player", "_name")

    def __init__(self, player: Player, name: str = "") -> None:
        self._player = player
        self._name = name or player.display_name

    @property
    def player(self) -> Player:
        return self._player

    @property
    def name(self) -> str:
        return self._name

    def request_move(self, game: Game) -> None:
        pass  # Human moves arrive via controller.submit_input()

    def __repr__(self) -> str:
        return f"HumanPlayer({self._player.name}, {self._name!r})"
