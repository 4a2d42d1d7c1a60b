"""Shared test fixtures for the game engine and console tests."""

import pytest

from tictactoe.game.rules import apply_move, initialize


def play_moves(state, moves):
    """Apply a sequence of (row, col) moves and return the state."""
    for row, col in moves:
        apply_move(state, row, col)
    return state


# X: (0,0),(0,1),(1,2),(2,0),(2,2)   O: (0,2),(1,0),(1,1),(2,1)
TIE_SEQUENCE = [(0, 0), (0, 2), (0, 1), (1, 0), (1, 2), (1, 1), (2, 0), (2, 1), (2, 2)]


@pytest.fixture
def state():
    return initialize()


@pytest.fixture
def tied_state():
    return play_moves(initialize(), TIE_SEQUENCE)
