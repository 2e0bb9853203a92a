"""
Reversi move helpers.

Implements the move sequence a driver runs each turn:
- Check the placement brackets at least one opponent run
- Write the mover's token
- Flip every bracketed run

Turn alternation, passing and end-of-game scoring stay with the caller.
"""

import logging
from typing import List, Tuple

from .errors import IllegalMoveError
from .grid import Grid
from .tokens import Token

logger = logging.getLogger(__name__)


def create_starting_grid(rows: int, columns: int) -> Grid:
    """
    Create a grid in the standard starting position.

    Args:
        rows: Number of rows (even, at least 2)
        columns: Number of columns (even, at least 2)

    Returns:
        Grid with the four centre tokens placed
    """
    grid = Grid(rows, columns)
    grid.set_initial_layout()
    return grid


def opponent_of(token: Token) -> Token:
    return token.opponent


def play_move(grid: Grid, row: int, column: int, mover: Token) -> List[Tuple[int, int]]:
    """
    Validate and apply a move in one step.

    The grid is left untouched when the move is illegal.

    Args:
        grid: Grid to mutate
        row: Target row
        column: Target column
        mover: Colour being placed

    Returns:
        Coordinates flipped by the move
    """
    if not grid.is_legal_move(row, column, mover):
        raise IllegalMoveError(row, column, mover)

    grid.place(row, column, mover)
    flipped = grid.apply_captures(row, column, mover)
    logger.debug("Applied %s move (%d, %d), %d captured", mover.name, row, column, len(flipped))
    return flipped
