"""Application entry point."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch a two-player game on the current terminal."""
    from tictactoe.cli.session import run_session

    # Diagnostics go to stderr; stdout carries only the game transcript.
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_session(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
