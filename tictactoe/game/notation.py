"""Move notation parser and emitter.

A move is a row digit followed by a column letter:
  1A     top-left tile
  2b     centre row, middle column (letters are case-insensitive)
  3C     bottom-right tile
"""

from __future__ import annotations

import re

from tictactoe.game.board import COL_LABELS, ROW_LABELS, rc_to_notation

_MOVE_RE = re.compile(r"^([1-3])([A-Ca-c])$")


class InvalidMoveNotation(ValueError):
    """Raised for a token that is not a move; ``token`` is the offending text."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid move notation: {token!r}")


def parse_move(token: str) -> tuple[int, int]:
    """Parse a move token such as '1A' into zero-indexed (row, col).

    Raises:
        InvalidMoveNotation: If the token does not match the grammar.
    """
    token = token.strip()
    m = _MOVE_RE.match(token)
    if not m:
        raise InvalidMoveNotation(token)
    row = ROW_LABELS.index(m.group(1))
    col = COL_LABELS.index(m.group(2).upper())
    return (row, col)


def move_to_notation(row: int, col: int) -> str:
    """Convert zero-indexed (row, col) to a move token."""
    return rc_to_notation(row, col)
