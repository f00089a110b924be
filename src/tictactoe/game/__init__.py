"""Game management layer — controller, players, session state machine.

Quick start::

    from tictactoe.core import Player
    from tictactoe.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        player1=HumanPlayer(Player.PLAYER1, "Alice"),
        player2=HumanPlayer(Player.PLAYER2, "Bob"),
    )
    ctrl.submit_input("1 1")
"""

from tictactoe.game.controller import GameController, GameEvents
from tictactoe.game.interfaces import GamePhase, IGameController, IPlayer
from tictactoe.game.player import HumanPlayer

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "HumanPlayer",
]
