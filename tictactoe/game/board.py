"""Board constants, coordinate helpers, and text-based rendering."""

from __future__ import annotations

from typing import Optional

BOARD_SIZE = 3

# Row labels for notation (1-indexed, row 0 = "1")
ROW_LABELS = "123"
# Column labels for notation
COL_LABELS = "ABC"

EMPTY_GLYPH = "▢"
DEFAULT_GLYPHS = {"x": "x", "o": "o"}


def in_bounds(row, col) -> bool:
    """True if (row, col) addresses a tile on the board."""
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def rc_to_notation(row: int, col: int) -> str:
    """Convert (row, col) to move notation like '1A'."""
    return ROW_LABELS[row] + COL_LABELS[col]


def render_board(board, glyphs: Optional[dict[str, str]] = None,
                 empty: str = EMPTY_GLYPH) -> str:
    """Render the board as a text string.

    Args:
        board: 3x3 rows of tiles. Each tile is None or an object with a
            ``char`` attribute ('x' or 'o').
        glyphs: Optional mapping from piece char to the glyph to draw.
        empty: Glyph for an empty tile.

    Example output::

           A B C
         1 x ▢ ▢
         2 ▢ ▢ o
         3 ▢ ▢ ▢
    """
    glyphs = glyphs or DEFAULT_GLYPHS
    lines = ["  " + "".join(f" {label}" for label in COL_LABELS)]
    for row, tiles in enumerate(board):
        row_str = f" {ROW_LABELS[row]}"
        for tile in tiles:
            row_str += " " + (empty if tile is None else glyphs.get(tile.char, tile.char))
        lines.append(row_str)
    return "\n".join(lines)
