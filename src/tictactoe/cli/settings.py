"""Display settings for the terminal driver."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.core.enums import GameState


@dataclass(frozen=True)
class CliSettings:
    """All strings the terminal session prints around the board.

    The game takes no flags or environment variables, so these defaults are
    the whole configuration surface; tests construct variants directly.
    """

    header: str = "=== Tic-Tac-Toe ==="
    turn_template: str = "{name}'s turn"
    prompt: str = "Enter row and column (0-2), e.g., '1 1': "
    player1_wins: str = "🎉 Player 1 (X) wins!"
    player2_wins: str = "🎉 Player 2 (O) wins!"
    draw: str = "It's a draw!"

    def result_line(self, state: GameState) -> str:
        if state is GameState.PLAYER1_WON:
            return self.player1_wins
        if state is GameState.PLAYER2_WON:
            return self.player2_wins
        if state is GameState.DRAW:
            return self.draw
        raise ValueError(f"No result for a game that is {state.name}")
