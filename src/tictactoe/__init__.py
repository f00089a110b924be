"""Two-player terminal tic-tac-toe: rules engine, input validation, CLI driver."""

__version__ = "0.1.0"
