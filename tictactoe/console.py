"""Interactive console front end for tic-tac-toe.

Usage:
    tictactoe                              # Human vs Human
    tictactoe --config configs/play.yaml   # Custom glyphs / prompt
    tictactoe --log-level DEBUG            # Log every move to stderr
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from tictactoe.config import ConsoleConfig, load_config
from tictactoe.game.board import render_board, rc_to_notation
from tictactoe.game.notation import InvalidMoveNotation, parse_move
from tictactoe.game.rules import (
    apply_move, board_view, current_piece, initialize, is_finished, winner,
)
from tictactoe.game.state import (
    GameAlreadyOver, GameState, InvalidPosition, Outcome, TileOccupied,
)

logger = logging.getLogger("tictactoe.console")


class _EndOfInput(Exception):
    pass


def display_state(state: GameState, config: ConsoleConfig, out: TextIO):
    """Print the current board followed by a blank line."""
    print(render_board(board_view(state), glyphs=config.glyphs,
                       empty=config.empty_glyph), file=out)
    print(file=out)


def prompt_move(config: ConsoleConfig, stdin: TextIO, stdout: TextIO,
                stderr: TextIO) -> tuple[int, int]:
    """Prompt until a well-formed move is entered. Raises _EndOfInput on EOF."""
    while True:
        stdout.write(config.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise _EndOfInput()
        token = line.rstrip()
        try:
            return parse_move(token)
        except InvalidMoveNotation as e:
            logger.debug("Rejected move token %r", e.token)
            print(f"Invalid move: '{e.token}'. Please try again.", file=stderr)


def result_message(outcome: Outcome, config: ConsoleConfig) -> str:
    if outcome is Outcome.TIE:
        return "Tie!"
    return f"{config.glyphs[outcome.piece.char]} wins!"


def play_game(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout,
              stderr: TextIO = sys.stderr,
              config: Optional[ConsoleConfig] = None) -> int:
    """Play one game over the given streams. Returns the process exit code."""
    config = config or ConsoleConfig()
    state = initialize()

    while not is_finished(state):
        display_state(state, config, stdout)
        piece = current_piece(state)
        print(f"Current piece: {config.glyphs[piece.char]}", file=stdout)

        try:
            row, col = prompt_move(config, stdin, stdout, stderr)
        except _EndOfInput:
            print(file=stdout)
            logger.info("End of input, leaving unfinished game")
            return 0

        try:
            apply_move(state, row, col)
        except TileOccupied as e:
            print(f"The tile at position {rc_to_notation(e.row, e.col)} already has "
                  f"piece {config.glyphs[e.piece.char]} in it!", file=stderr)
        except (GameAlreadyOver, InvalidPosition) as e:
            # The loop guard and the move grammar rule both of these out.
            raise RuntimeError(f"Unexpected engine rejection: {e}") from e

    display_state(state, config, stdout)
    print(result_message(winner(state), config), file=stdout)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to console config YAML (e.g. configs/play.yaml)")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for stderr diagnostics (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error("Could not load config %s: %s", args.config, e)
        return 2

    return play_game(sys.stdin, sys.stdout, sys.stderr, config)


if __name__ == "__main__":
    sys.exit(main())
