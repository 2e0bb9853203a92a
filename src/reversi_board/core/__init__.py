"""Core board representation and move rules."""

from .errors import (
    ReversiError,
    DimensionError,
    CoordinateOutOfRange,
    InvalidTokenError,
    IllegalMoveError,
    AllocationError,
)
from .tokens import Token
from .snapshot import GridSnapshot
from .grid import Grid, DIRECTIONS
from .rules import create_starting_grid, opponent_of, play_move

__all__ = [
    "ReversiError",
    "DimensionError",
    "CoordinateOutOfRange",
    "InvalidTokenError",
    "IllegalMoveError",
    "AllocationError",
    "Token",
    "GridSnapshot",
    "Grid",
    "DIRECTIONS",
    "create_starting_grid",
    "opponent_of",
    "play_move",
]
