"""Terminal scan loop: prompt, read a line, submit it, render the outcome."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tictactoe.cli.render import render_board, render_error
from tictactoe.cli.settings import CliSettings
from tictactoe.core.board import Board
from tictactoe.core.enums import Player
from tictactoe.core.errors import TicTacToeError
from tictactoe.game.controller import GameController
from tictactoe.game.player import HumanPlayer

_LOGGER = logging.getLogger(__name__)


def run_session(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    settings: CliSettings | None = None,
) -> int:
    """Play one game between two humans sharing the terminal.

    Returns the process exit code: ``0`` both when the game reaches a
    terminal state and when input ends early.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    settings = settings or CliSettings()

    def write(text: str = "") -> None:
        print(text, file=stdout)

    def show_board(board: Board) -> None:
        write()
        write(render_board(board))
        write()

    def show_error(error: TicTacToeError) -> None:
        write()
        write(render_error(error))
        write()

    ctrl = GameController()
    ctrl.events.on_error.append(show_error)
    ctrl.new_game(HumanPlayer(Player.PLAYER1), HumanPlayer(Player.PLAYER2))

    write(settings.header)
    write()

    while not ctrl.is_game_over:
        show_board(ctrl.game.board)
        cp = ctrl.current_player
        name = cp.name if cp is not None else ctrl.game.current_player.display_name
        write()
        write(settings.turn_template.format(name=name))
        stdout.write(settings.prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            _LOGGER.debug("End of input after %d moves", ctrl.game.move_count)
            break
        ctrl.submit_input(line)

    show_board(ctrl.game.board)
    write()
    if ctrl.is_game_over:
        write(settings.result_line(ctrl.state))
    return 0
