"""Move validation, move execution, and win/tie detection.

Outcome evaluation only inspects the lines passing through the tile that was
just played (its row, its column, and whichever diagonals contain it). This
is sufficient because a tile is filled exactly once and never emptied, so a
line that did not contain the last move cannot have just become complete.
Anything that empties or rewrites tiles (undo, replay) must rescan the whole
board instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from tictactoe.game.board import BOARD_SIZE, in_bounds, rc_to_notation
from tictactoe.game.state import (
    GameAlreadyOver, GameState, InvalidPosition, Outcome, Piece, Tile,
    TileOccupied,
)

logger = logging.getLogger("tictactoe.game")


def initialize() -> GameState:
    """Return a fresh game: empty board, X to move, no outcome."""
    return GameState()


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """Place the current piece at (row, col) and return the state.

    This modifies the state in-place. Nothing is modified if the move is
    rejected.

    Raises:
        GameAlreadyOver: The game already has an outcome (checked first).
        InvalidPosition: row or col is outside [0, 3).
        TileOccupied: The target tile already holds a piece.
    """
    if state.done:
        raise GameAlreadyOver()
    if not in_bounds(row, col):
        raise InvalidPosition(row, col)
    existing = state.board[row][col]
    if existing is not None:
        raise TileOccupied(existing, row, col)

    piece = state.current_piece
    state.board[row][col] = piece
    state.current_piece = piece.opposite()
    state.move_history.append((row, col))
    logger.debug("%s plays %s (move %d)", piece.char, rc_to_notation(row, col),
                 state.move_count)

    _update_outcome(state, row, col)
    return state


def _line_winner(line: Sequence[Tile]) -> Optional[Piece]:
    """Piece occupying every tile of the line, or None."""
    first = line[0]
    if first is not None and all(tile is first for tile in line):
        return first
    return None


def _candidate_lines(state: GameState, row: int, col: int) -> list[tuple[Tile, ...]]:
    """Lines through the pivot, in evaluation order: row, column, diagonals."""
    board = state.board
    lines = [
        tuple(board[row]),
        tuple(board[r][col] for r in range(BOARD_SIZE)),
    ]
    if row == col:
        lines.append(tuple(board[i][i] for i in range(BOARD_SIZE)))
    if row + col == BOARD_SIZE - 1:
        lines.append(tuple(board[i][BOARD_SIZE - 1 - i] for i in range(BOARD_SIZE)))
    return lines


def _update_outcome(state: GameState, row: int, col: int):
    if state.done:
        return

    for line in _candidate_lines(state, row, col):
        piece = _line_winner(line)
        if piece is not None:
            state.outcome = Outcome.for_piece(piece)
            logger.info("%s wins after %d moves", piece.char, state.move_count)
            return

    if all(tile is not None for tiles in state.board for tile in tiles):
        state.outcome = Outcome.TIE
        logger.info("Tie after %d moves", state.move_count)


def generate_legal_moves(state: GameState) -> list[tuple[int, int]]:
    """Empty tiles in row-major order; empty once the game is over."""
    if state.done:
        return []
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
            if state.board[r][c] is None]


def is_finished(state: GameState) -> bool:
    return state.done


def winner(state: GameState) -> Optional[Outcome]:
    return state.outcome


def current_piece(state: GameState) -> Piece:
    return state.current_piece


def board_view(state: GameState) -> tuple[tuple[Tile, ...], ...]:
    """Read-only snapshot of the board."""
    return state.get_board_tuple()


def check_winner(state: GameState) -> tuple[bool, Optional[Outcome]]:
    """Check if the game is over.

    Returns (is_done, outcome).
    """
    return state.done, state.outcome
