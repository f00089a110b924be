"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from tictactoe.core.game import Game, new_game

PlayFn = Callable[[Iterable[tuple[int, int]]], Game]


def play_moves(moves: Iterable[tuple[int, int]], game: Game | None = None) -> Game:
    """Apply *moves* in order from *game* (or a fresh game)."""
    g = new_game() if game is None else game
    for row, col in moves:
        g = g.apply_move(row, col)
    return g


@pytest.fixture
def play() -> PlayFn:
    """Replay a list of ``(row, col)`` moves from a new game."""
    return play_moves
