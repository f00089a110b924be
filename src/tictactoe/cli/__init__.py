"""Terminal driver: rendering, display settings and the scan loop."""

from tictactoe.cli.render import render_board, render_error
from tictactoe.cli.session import run_session
from tictactoe.cli.settings import CliSettings

__all__ = [
    "CliSettings",
    "render_board",
    "render_error",
    "run_session",
]
