"""
Mutable Reversi grid.

The grid owns a flat, row-major list of tokens and implements the two
operations with real logic in them:

- ``is_legal_move``: does a placement bracket at least one run of
  opponent tokens in any of the 8 compass directions?
- ``apply_captures``: recolour every bracketed run to the mover's colour.

Both are colour-parametric: the mover is passed in and the opponent is
derived from it. Turn order is not tracked here.
"""

import logging
from typing import Iterable, List, Tuple

from .errors import AllocationError, CoordinateOutOfRange, DimensionError, InvalidTokenError
from .snapshot import MIN_DIMENSION, GridSnapshot
from .tokens import Token, ensure_colour

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

# (row step, column step): N, NW, W, SW, S, SE, E, NE
DIRECTIONS: Tuple[Coordinate, ...] = (
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
)


class Grid:
    """
    Rectangular board of tokens with fixed dimensions.

    A new grid is all EMPTY; call ``set_initial_layout`` to seed the four
    centre tokens (or use ``rules.create_starting_grid``).
    """

    def __init__(self, rows: int, columns: int):
        """
        Allocate an empty grid.

        Args:
            rows: Number of rows (at least 2)
            columns: Number of columns (at least 2)
        """
        if rows < MIN_DIMENSION or columns < MIN_DIMENSION:
            raise DimensionError(rows, columns, f"both dimensions must be at least {MIN_DIMENSION}")

        self._rows = rows
        self._columns = columns
        try:
            self._cells: List[Token] = [Token.EMPTY] * (rows * columns)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"Cannot allocate a {rows}x{columns} board") from exc

    @classmethod
    def from_rows(cls, lines: Iterable[str]) -> "Grid":
        """
        Build a grid from glyph strings, one per row.

        Spaces are ignored, so both ``"..xo"`` and ``". . x o"`` work.
        """
        parsed = [[ch for ch in line if not ch.isspace()] for line in lines]
        if not parsed or any(len(row) != len(parsed[0]) for row in parsed):
            raise DimensionError(len(parsed), len(parsed[0]) if parsed else 0, "rows must be equal length")

        grid = cls(len(parsed), len(parsed[0]))
        for r, row in enumerate(parsed):
            for c, glyph in enumerate(row):
                try:
                    grid._cells[grid._offset(r, c)] = Token(glyph)
                except ValueError as exc:
                    raise InvalidTokenError(f"Unknown glyph {glyph!r} at ({r}, {c})") from exc
        return grid

    @classmethod
    def from_snapshot(cls, snapshot: GridSnapshot) -> "Grid":
        grid = cls(snapshot.rows, snapshot.columns)
        grid._cells[:] = snapshot.cells
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def cells(self) -> Tuple[Token, ...]:
        """Row-major copy of every cell."""
        return tuple(self._cells)

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < self._rows and 0 <= column < self._columns

    def _offset(self, row: int, column: int) -> int:
        return row * self._columns + column

    def _index(self, row: int, column: int) -> int:
        """Linear index of (row, column); raises if off the grid."""
        if not self._inside(row, column):
            raise CoordinateOutOfRange(row, column, self._rows, self._columns)
        return self._offset(row, column)

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        for i in range(len(self._cells)):
            self._cells[i] = Token.EMPTY

    def set_initial_layout(self) -> None:
        """
        Seed the centre 2x2 block.

        DARK goes on the main diagonal of the block, LIGHT on the other.
        Odd dimensions have no single centre block and are rejected.
        """
        if self._rows % 2 or self._columns % 2:
            raise DimensionError(self._rows, self._columns, "starting layout needs even dimensions")

        mid_row = self._rows // 2
        mid_col = self._columns // 2
        self.place(mid_row - 1, mid_col - 1, Token.DARK)
        self.place(mid_row, mid_col, Token.DARK)
        self.place(mid_row, mid_col - 1, Token.LIGHT)
        self.place(mid_row - 1, mid_col, Token.LIGHT)
        logger.debug("Seeded starting layout on %dx%d board", self._rows, self._columns)

    def get(self, row: int, column: int) -> Token:
        return self._cells[self._index(row, column)]

    def place(self, row: int, column: int, token: Token) -> None:
        """Write ``token`` at (row, column) without any legality check."""
        if not isinstance(token, Token):
            raise InvalidTokenError(f"Expected a Token, got {token!r}")
        self._cells[self._index(row, column)] = token

    def _bracket(self, row: int, column: int, d_row: int, d_col: int, mover: Token) -> List[Coordinate]:
        """
        Opponent run next to (row, column) in one direction.

        Returns the run only when it is closed by a mover token; an empty
        cell or the grid edge before that yields an empty list.
        """
        opponent = mover.opponent
        run: List[Coordinate] = []
        r, c = row + d_row, column + d_col
        while self._inside(r, c) and self._cells[self._offset(r, c)] is opponent:
            run.append((r, c))
            r += d_row
            c += d_col

        if run and self._inside(r, c) and self._cells[self._offset(r, c)] is mover:
            return run
        return []

    def is_legal_move(self, row: int, column: int, mover: Token) -> bool:
        """
        Check whether ``mover`` may place a token at (row, column).

        The target must be EMPTY and at least one direction must hold one
        or more opponent tokens followed by a mover token.

        Args:
            row: Target row
            column: Target column
            mover: DARK or LIGHT

        Returns:
            True if the placement brackets something
        """
        ensure_colour(mover)
        if self._cells[self._index(row, column)] is not Token.EMPTY:
            return False

        return any(self._bracket(row, column, d_row, d_col, mover) for d_row, d_col in DIRECTIONS)

    def captures(self, row: int, column: int, mover: Token) -> List[Coordinate]:
        """Coordinates ``apply_captures`` would flip, without flipping them."""
        ensure_colour(mover)
        self._index(row, column)

        flipped: List[Coordinate] = []
        for d_row, d_col in DIRECTIONS:
            flipped.extend(self._bracket(row, column, d_row, d_col, mover))
        return flipped

    def apply_captures(self, row: int, column: int, mover: Token) -> List[Coordinate]:
        """
        Flip every bracketed opponent run around (row, column).

        Each direction is scanned and committed on its own. The move is
        not re-validated; callers check ``is_legal_move`` first.

        Returns:
            Coordinates that changed colour
        """
        ensure_colour(mover)
        self._index(row, column)

        flipped: List[Coordinate] = []
        for d_row, d_col in DIRECTIONS:
            run = self._bracket(row, column, d_row, d_col, mover)
            for r, c in run:
                self._cells[self._offset(r, c)] = mover
            flipped.extend(run)

        logger.debug("%s at (%d, %d) flipped %d token(s)", mover.name, row, column, len(flipped))
        return flipped

    def legal_moves(self, mover: Token) -> List[Coordinate]:
        """All legal placements for ``mover`` in row-major order."""
        return [
            (r, c)
            for r in range(self._rows)
            for c in range(self._columns)
            if self.is_legal_move(r, c, mover)
        ]

    def has_legal_move(self, mover: Token) -> bool:
        return any(
            self.is_legal_move(r, c, mover)
            for r in range(self._rows)
            for c in range(self._columns)
        )

    def count(self, token: Token) -> int:
        return sum(1 for cell in self._cells if cell is token)

    def score(self) -> Tuple[int, int]:
        """(dark, light) token counts."""
        return self.count(Token.DARK), self.count(Token.LIGHT)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(rows=self._rows, columns=self._columns, cells=tuple(self._cells))

    def copy(self) -> "Grid":
        # Bypass __init__ so the copy doesn't allocate and then overwrite.
        new_grid = Grid.__new__(Grid)
        new_grid._rows = self._rows
        new_grid._columns = self._columns
        new_grid._cells = self._cells[:]
        return new_grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions == other.dimensions and self._cells == other._cells

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, columns={self._columns})"

    def __str__(self) -> str:
        return str(self.snapshot())
