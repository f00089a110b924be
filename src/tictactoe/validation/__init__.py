"""Validation package: raw input line → board coordinates."""

from tictactoe.validation.input import (
    parse_and_validate_input,
    validate_input,
    validate_input_format,
    validate_numeric,
    validate_range,
)

__all__ = [
    "parse_and_validate_input",
    "validate_input",
    "validate_input_format",
    "validate_numeric",
    "validate_range",
]
