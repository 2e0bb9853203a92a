"""
Read-only board snapshots.

A snapshot is what renderers and other consumers look at: it exposes the
same accessors as the live grid (``rows``, ``columns``, ``get``,
``count``) but cannot be mutated. Cells are stored row-major:

    index = row * columns + column
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import CoordinateOutOfRange, DimensionError, InvalidTokenError
from .tokens import Token

MIN_DIMENSION = 2


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable copy of a board's cells."""

    rows: int
    columns: int
    cells: Tuple[Token, ...]  # Row-major, length rows * columns

    def __post_init__(self) -> None:
        """Validate snapshot invariants."""
        if self.rows < MIN_DIMENSION or self.columns < MIN_DIMENSION:
            raise DimensionError(
                self.rows, self.columns, f"both dimensions must be at least {MIN_DIMENSION}"
            )
        expected_size = self.rows * self.columns
        if len(self.cells) != expected_size:
            raise ValueError(
                f"Cell count {len(self.cells)} doesn't match expected {expected_size}"
            )
        if any(not isinstance(cell, Token) for cell in self.cells):
            raise InvalidTokenError("Snapshot cells must all be Token values")

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def get(self, row: int, column: int) -> Token:
        """Token at (row, column)."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise CoordinateOutOfRange(row, column, self.rows, self.columns)
        return self.cells[row * self.columns + column]

    def count(self, token: Token) -> int:
        return sum(1 for cell in self.cells if cell is token)

    def __str__(self) -> str:
        lines = []
        for row in range(self.rows):
            start = row * self.columns
            lines.append(" ".join(cell.glyph for cell in self.cells[start : start + self.columns]))
        return "\n".join(lines)
