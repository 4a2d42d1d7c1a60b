"""Tic-tac-toe game engine: state, rules, board, notation."""

from tictactoe.game.state import (
    GameState, Piece, Outcome, MoveError, GameAlreadyOver, InvalidPosition, TileOccupied,
)
from tictactoe.game.rules import (
    initialize, apply_move, is_finished, winner, current_piece, board_view,
    check_winner, generate_legal_moves,
)
from tictactoe.game.board import BOARD_SIZE, render_board, rc_to_notation
from tictactoe.game.notation import parse_move, move_to_notation, InvalidMoveNotation

__all__ = [
    "GameState", "Piece", "Outcome", "MoveError", "GameAlreadyOver", "InvalidPosition",
    "TileOccupied",
    "initialize", "apply_move", "is_finished", "winner", "current_piece", "board_view",
    "check_winner", "generate_legal_moves",
    "BOARD_SIZE", "render_board", "rc_to_notation",
    "parse_move", "move_to_notation", "InvalidMoveNotation",
]
