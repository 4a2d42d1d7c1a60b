"""Game state representation for tic-tac-toe."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from tictactoe.game.board import BOARD_SIZE, rc_to_notation


class Piece(Enum):
    X = "x"
    O = "o"

    @property
    def char(self) -> str:
        return self.value

    def opposite(self) -> Piece:
        return Piece.O if self is Piece.X else Piece.X


class Outcome(Enum):
    X_WINS = "x"
    O_WINS = "o"
    TIE = "tie"

    @classmethod
    def for_piece(cls, piece: Piece) -> Outcome:
        return cls.X_WINS if piece is Piece.X else cls.O_WINS

    @property
    def piece(self) -> Optional[Piece]:
        """Winning piece, or None for a tie."""
        if self is Outcome.TIE:
            return None
        return Piece(self.value)


# A tile is empty (None) or holds exactly one piece.
Tile = Optional[Piece]


class MoveError(Exception):
    """Base class for rejected moves. State is unchanged when raised."""


class GameAlreadyOver(MoveError):
    def __init__(self):
        super().__init__("Game is already over")


class InvalidPosition(MoveError):
    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row!r}, {col!r})")


class TileOccupied(MoveError):
    def __init__(self, piece: Piece, row: int, col: int):
        self.piece = piece
        self.row = row
        self.col = col
        super().__init__(
            f"Tile {rc_to_notation(row, col)} already holds piece {piece.char}"
        )


class GameState:
    """Complete game state for tic-tac-toe.

    Mutated only by ``rules.apply_move``. The outcome is write-once: once a
    game is decided, assigning a new outcome raises ``RuntimeError``.
    """

    def __init__(self):
        self.board: list[list[Tile]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.current_piece: Piece = Piece.X
        self.move_history: list[tuple[int, int]] = []
        self._outcome: Optional[Outcome] = None

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @outcome.setter
    def outcome(self, value: Outcome):
        if self._outcome is not None:
            raise RuntimeError(
                f"Outcome already decided ({self._outcome.name}), cannot set {value}"
            )
        if not isinstance(value, Outcome):
            raise TypeError(f"Expected Outcome, got {type(value).__name__}")
        self._outcome = value

    @property
    def done(self) -> bool:
        return self._outcome is not None

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    def get_piece_at(self, row: int, col: int) -> Tile:
        """Get piece at position, or None."""
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self.board[row][col]
        return None

    def occupied_count(self) -> int:
        return sum(1 for row in self.board for tile in row if tile is not None)

    def get_board_tuple(self) -> tuple[tuple[Tile, ...], ...]:
        """Immutable snapshot of the board."""
        return tuple(tuple(row) for row in self.board)

    def __repr__(self) -> str:
        return (f"GameState(current_piece={self.current_piece.name}, "
                f"outcome={self._outcome.name if self._outcome else None}, "
                f"moves={self.move_count})")
