"""Parse and validate a move typed at the terminal, e.g. ``"1 2"``.

Pipeline: tokenize on whitespace → shape check → integer parse → range check.
The validator never looks at a board; occupied cells are the engine's concern.
"""

from __future__ import annotations

import re

from tictactoe.core.errors import (
    IncompleteInputError,
    InvalidFormatError,
    InvalidRangeError,
    TicTacToeError,
)
from tictactoe.core.types import MAX_COORDINATE, MIN_COORDINATE, Coord

# Optional sign then ASCII digits only; int() alone would accept "1_0" or "١".
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_MAX_INT64 = 2**63 - 1
_MIN_INT64 = -(2**63)
_MAX_INT64_DIGITS = len(str(_MAX_INT64))


def validate_range(row: int, col: int) -> None:
    """Raise :class:`InvalidRangeError` unless both values lie in 0–2."""
    if not MIN_COORDINATE <= row <= MAX_COORDINATE:
        raise InvalidRangeError(f"row {row}")
    if not MIN_COORDINATE <= col <= MAX_COORDINATE:
        raise InvalidRangeError(f"column {col}")


def validate_numeric(token: str) -> int:
    """Parse a signed decimal integer token.

    Values outside the signed 64-bit range are rejected as malformed rather
    than out of range, so a huge token never reaches ``int()``.
    """
    token = token.strip()
    if not token:
        raise InvalidFormatError()
    if _INTEGER_RE.fullmatch(token) is None:
        raise InvalidFormatError(f"{token!r} is not a valid number")
    # Leading zeros are dropped first so only significant digits reach int().
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INT64_DIGITS:
        raise InvalidFormatError(f"{token!r} is out of integer range")
    value = -int(digits) if token.startswith("-") else int(digits)
    if not _MIN_INT64 <= value <= _MAX_INT64:
        raise InvalidFormatError(f"{token!r} is out of integer range")
    return value


def validate_input_format(line: str) -> Coord:
    """Split *line* into exactly two integers (not range-checked)."""
    parts = line.split()
    if len(parts) < 2:
        raise IncompleteInputError()
    if len(parts) > 2:
        raise InvalidFormatError(f"expected 2 numbers, got {len(parts)}")
    return validate_numeric(parts[0]), validate_numeric(parts[1])


def parse_and_validate_input(line: str) -> Coord:
    """Full pipeline: format, then range.  Returns ``(row, col)``."""
    row, col = validate_input_format(line)
    validate_range(row, col)
    return row, col


def validate_input(line: str) -> tuple[int, int, TicTacToeError | None]:
    """Value-returning form: ``(row, col, None)`` or ``(0, 0, error)``."""
    try:
        row, col = parse_and_validate_input(line)
    except TicTacToeError as exc:
        return 0, 0, exc
    return row, col, None
