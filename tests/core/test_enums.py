"""Tests for Cell, Player and GameState enumerations."""

import pytest

from tictactoe.core.enums import Cell, GameState, Player


class TestCell:
    def test_values(self) -> None:
        assert int(Cell.EMPTY) == 0
        assert int(Cell.X) == 1
        assert int(Cell.O) == 2

    def test_empty_is_default(self) -> None:
        assert Cell(0) is Cell.EMPTY

    @pytest.mark.parametrize(
        ("cell", "text"), [(Cell.EMPTY, " "), (Cell.X, "X"), (Cell.O, "O")]
    )
    def test_str(self, cell: Cell, text: str) -> None:
        assert str(cell) == text

    def test_is_occupied(self) -> None:
        assert not Cell.EMPTY.is_occupied
        assert Cell.X.is_occupied
        assert Cell.O.is_occupied


class TestPlayer:
    def test_marks(self) -> None:
        assert Player.PLAYER1.mark is Cell.X
        assert Player.PLAYER2.mark is Cell.O

    def test_display_names(self) -> None:
        assert Player.PLAYER1.display_name == "Player 1 (X)"
        assert Player.PLAYER2.display_name == "Player 2 (O)"
        assert str(Player.PLAYER2) == "Player 2 (O)"

    def test_other(self) -> None:
        assert Player.PLAYER1.other is Player.PLAYER2
        assert Player.PLAYER2.other is Player.PLAYER1

    @pytest.mark.parametrize("player", list(Player))
    def test_other_is_involution(self, player: Player) -> None:
        assert player.other.other is player
        assert player.other is not player

    def test_from_mark(self) -> None:
        assert Player.from_mark(Cell.X) is Player.PLAYER1
        assert Player.from_mark(Cell.O) is Player.PLAYER2
        with pytest.raises(ValueError):
            Player.from_mark(Cell.EMPTY)

    def test_winning_state(self) -> None:
        assert Player.PLAYER1.winning_state is GameState.PLAYER1_WON
        assert Player.PLAYER2.winning_state is GameState.PLAYER2_WON


class TestGameState:
    def test_only_in_progress_is_non_terminal(self) -> None:
        terminal = [s for s in GameState if s.is_terminal]
        assert GameState.IN_PROGRESS not in terminal
        assert len(terminal) == 3

    def test_winner(self) -> None:
        assert GameState.PLAYER1_WON.winner is Player.PLAYER1
        assert GameState.PLAYER2_WON.winner is Player.PLAYER2
        assert GameState.DRAW.winner is None
        assert GameState.IN_PROGRESS.winner is None
