"""Two-player tic-tac-toe: game engine and console front end."""

__version__ = "0.1.0"
