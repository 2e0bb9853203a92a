"""Reversi (Othello) board: move legality, captures and console play."""

__version__ = "0.1.0"
