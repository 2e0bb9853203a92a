"""Exception hierarchy for the Reversi board."""


class ReversiError(Exception):
    """Base class for every error raised by the board core."""


class DimensionError(ReversiError, ValueError):
    """Board dimensions cannot hold the requested layout."""

    def __init__(self, rows: int, columns: int, reason: str):
        self.rows = rows
        self.columns = columns
        super().__init__(f"Invalid board size {rows}x{columns}: {reason}")


class CoordinateOutOfRange(ReversiError, IndexError):
    """A row/column pair falls outside the grid."""

    def __init__(self, row: int, column: int, rows: int, columns: int):
        self.row = row
        self.column = column
        super().__init__(
            f"Position ({row}, {column}) is outside the {rows}x{columns} board"
        )


class InvalidTokenError(ReversiError, ValueError):
    """A token, mover colour or colour tag is not acceptable here."""


class IllegalMoveError(ReversiError, ValueError):
    """A placement does not bracket any opponent token."""

    def __init__(self, row: int, column: int, mover):
        self.row = row
        self.column = column
        self.mover = mover
        super().__init__(f"Illegal move for {mover.name} at ({row}, {column})")


class AllocationError(ReversiError, MemoryError):
    """The cell buffer for a board could not be allocated."""
