"""Immutable 3×3 board value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from tictactoe.core.enums import Cell
from tictactoe.core.types import BOARD_SIZE, Coord, is_valid_coord

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable value object holding nine cells in row-major order.

    Every "mutation" returns a new board; the receiver is never touched.
    """

    cells: tuple[Cell, ...] = (Cell.EMPTY,) * _CELL_COUNT

    def __post_init__(self) -> None:
        if len(self.cells) != _CELL_COUNT:
            raise ValueError(
                f"Board needs exactly {_CELL_COUNT} cells, got {len(self.cells)}"
            )
        # Normalise ints / lists into a tuple of Cell members.
        object.__setattr__(self, "cells", tuple(Cell(c) for c in self.cells))

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Board:
        """Build a board from three rows of three cells."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return cls(tuple(cell for row in rows for cell in row))

    # ── Element access ───────────────────────────────────────────────────

    @staticmethod
    def _index(row: int, col: int) -> int:
        if not is_valid_coord(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return row * BOARD_SIZE + col

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[self._index(row, col)]

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = coord
        return self.cell(row, col)

    def is_cell_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) is Cell.EMPTY

    def with_cell(self, row: int, col: int, cell: Cell) -> Board:
        """Return a copy of this board with (*row*, *col*) set to *cell*."""
        idx = self._index(row, col)
        cells = list(self.cells)
        cells[idx] = cell
        return Board(tuple(cells))

    # ── Query helpers ────────────────────────────────────────────────────

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def count_occupied(self) -> int:
        return _CELL_COUNT - self.count(Cell.EMPTY)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def empty_cells(self) -> list[Coord]:
        """Coordinates of every empty cell in row-major order."""
        return [
            divmod(i, BOARD_SIZE)
            for i, c in enumerate(self.cells)
            if c is Cell.EMPTY
        ]

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        for r in range(BOARD_SIZE):
            yield self.cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE]

    def line(self, coords: Iterable[Coord]) -> tuple[Cell, ...]:
        return tuple(self[coord] for coord in coords)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return "\n".join(
            "".join("." if c is Cell.EMPTY else str(c) for c in row)
            for row in self.rows()
        )
