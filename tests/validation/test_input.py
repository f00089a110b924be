"""Tests for the input validation pipeline."""

import pytest

from tictactoe.core.errors import (
    ErrorKind,
    IncompleteInputError,
    InvalidFormatError,
    InvalidRangeError,
    TicTacToeError,
)
from tictactoe.validation.input import (
    parse_and_validate_input,
    validate_input,
    validate_input_format,
    validate_numeric,
    validate_range,
)


class TestValidateRange:
    @pytest.mark.parametrize(("row", "col"), [(0, 0), (1, 1), (2, 2), (0, 2), (2, 0)])
    def test_valid(self, row: int, col: int) -> None:
        validate_range(row, col)  # should not raise

    @pytest.mark.parametrize(
        ("row", "col"), [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5), (-10, 100)]
    )
    def test_invalid(self, row: int, col: int) -> None:
        with pytest.raises(InvalidRangeError):
            validate_range(row, col)


class TestValidateNumeric:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [("0", 0), ("2", 2), ("-1", -1), ("+1", 1), ("10", 10), (" 1 ", 1), ("007", 7)],
    )
    def test_valid(self, token: str, expected: int) -> None:
        assert validate_numeric(token) == expected

    @pytest.mark.parametrize(
        "token", ["", "   ", "a", "1.5", "1a", "a1", "1e3", "1_0", "--1", "+", "١"]
    )
    def test_invalid(self, token: str) -> None:
        with pytest.raises(InvalidFormatError):
            validate_numeric(token)

    def test_message_names_token(self) -> None:
        with pytest.raises(InvalidFormatError, match="'abc'"):
            validate_numeric("abc")

    @pytest.mark.parametrize(
        "token",
        ["9223372036854775808", "-9223372036854775809", "99999999999999999999", "1" * 5000],
    )
    def test_beyond_int64_is_invalid_format(self, token: str) -> None:
        with pytest.raises(InvalidFormatError, match="out of integer range"):
            validate_numeric(token)

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
            ("0" * 5000 + "2", 2),
            ("-000", 0),
        ],
    )
    def test_int64_bounds_accepted(self, token: str, expected: int) -> None:
        assert validate_numeric(token) == expected


class TestValidateInputFormat:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [("1 2", (1, 2)), ("  0   2  ", (0, 2)), ("1\t1", (1, 1)), ("5 5", (5, 5))],
    )
    def test_valid(self, line: str, expected: tuple[int, int]) -> None:
        assert validate_input_format(line) == expected

    @pytest.mark.parametrize("line", ["", "   ", "1", "\t2\n"])
    def test_incomplete(self, line: str) -> None:
        with pytest.raises(IncompleteInputError):
            validate_input_format(line)

    def test_too_many_tokens(self) -> None:
        with pytest.raises(InvalidFormatError, match="got 3"):
            validate_input_format("1 2 3")


class TestParseAndValidateInput:
    @pytest.mark.parametrize(
        ("line", "kind"),
        [
            ("", ErrorKind.INCOMPLETE_INPUT),
            ("1", ErrorKind.INCOMPLETE_INPUT),
            ("a b", ErrorKind.INVALID_FORMAT),
            ("1 2 3", ErrorKind.INVALID_FORMAT),
            ("1.5 0", ErrorKind.INVALID_FORMAT),
            ("5 5", ErrorKind.INVALID_RANGE),
            ("-1 0", ErrorKind.INVALID_RANGE),
            ("1 x", ErrorKind.INVALID_FORMAT),
            ("99999999999999999999 1", ErrorKind.INVALID_FORMAT),
            ("9223372036854775807 0", ErrorKind.INVALID_RANGE),
        ],
    )
    def test_error_kinds(self, line: str, kind: ErrorKind) -> None:
        with pytest.raises(TicTacToeError) as excinfo:
            parse_and_validate_input(line)
        assert excinfo.value.kind is kind

    @pytest.mark.parametrize(
        ("line", "expected"),
        [("1  1", (1, 1)), ("0 2", (0, 2)), ("2 0\n", (2, 0)), ("+2 -0", (2, 0))],
    )
    def test_success(self, line: str, expected: tuple[int, int]) -> None:
        assert parse_and_validate_input(line) == expected

    def test_format_checked_before_range(self) -> None:
        with pytest.raises(InvalidFormatError):
            parse_and_validate_input("9 x")


class TestValidateInput:
    def test_success(self) -> None:
        assert validate_input("1 2") == (1, 2, None)

    def test_error_value(self) -> None:
        row, col, err = validate_input("a b")
        assert (row, col) == (0, 0)
        assert isinstance(err, InvalidFormatError)

    @pytest.mark.parametrize(
        "line",
        [
            "", " ", "1", "x", "1 2 3", "3 3", "0 0", "2 2", "-0 +2", "0x1 1", "∞ 1",
            "99999999999999999999 1", "1" * 5000 + " 1", "1 " + "9" * 5000,
        ],
    )
    def test_total(self, line: str) -> None:
        row, col, err = validate_input(line)
        if err is None:
            assert 0 <= row <= 2 and 0 <= col <= 2
        else:
            assert err.kind in (
                ErrorKind.INVALID_RANGE,
                ErrorKind.INVALID_FORMAT,
                ErrorKind.INCOMPLETE_INPUT,
            )
