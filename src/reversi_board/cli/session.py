"""
Interactive console session.

Two players alternate, dark ('x') first. Each turn reads a line of the
form ``<row> <column> <coin>``; a wrong coin, malformed line or illegal
position is reported and the same player is asked again without touching
the board.

The session ends on ``q``/``quit``, at end of input, or when the player
to move has no legal placement anywhere (there is no pass rule).
"""

import logging
from typing import Callable, Optional, Tuple

from ..core import (
    CoordinateOutOfRange,
    DimensionError,
    Grid,
    IllegalMoveError,
    InvalidTokenError,
    Token,
    create_starting_grid,
    play_move,
)
from ..utils.rich_display import BoardDisplay

logger = logging.getLogger(__name__)

PLAYERS: Tuple[Tuple[int, Token], ...] = ((1, Token.DARK), (2, Token.LIGHT))
QUIT_COMMANDS = {"q", "quit", "exit"}

SIZE_PROMPT = "Please enter the size (x,y) of the game: "
TURN_PROMPT = "Player {number} ({tag}): Enter a position (x, y) and a coin: "


class InputError(ValueError):
    """A console line could not be parsed."""


def _parse_ints(parts, what: str):
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise InputError(f"{what} must be whole numbers, got {' '.join(parts)!r}") from None


def parse_dimensions(line: str) -> Tuple[int, int]:
    """Parse ``"<rows> <columns>"`` (commas allowed) into positive integers."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        raise InputError("Enter two numbers: rows and columns")
    rows, columns = _parse_ints(parts, "Board size")
    if rows <= 0 or columns <= 0:
        raise InputError("Board size must be positive")
    return rows, columns


def parse_move(line: str) -> Tuple[int, int, str]:
    """Parse ``"<row> <column> <coin>"`` into (row, column, coin)."""
    parts = line.replace(",", " ").split()
    if len(parts) != 3:
        raise InputError("Enter a row, a column and a coin, e.g. '2 3 x'")
    row, column = _parse_ints(parts[:2], "Row and column")
    return row, column, parts[2]


def prompt_starting_grid(read_line: Callable[[str], str], display: BoardDisplay) -> Grid:
    """
    Ask for the board size until a grid can be set up with it.

    Unparseable lines and sizes the starting layout rejects (odd, or
    below 2) are reported and asked again. EOFError from ``read_line``
    propagates to the caller.
    """
    while True:
        try:
            rows, columns = parse_dimensions(read_line(SIZE_PROMPT))
            return create_starting_grid(rows, columns)
        except (InputError, DimensionError) as exc:
            display.log_error(str(exc))


class ConsoleSession:
    """Drives one game between two people sharing a console."""

    def __init__(
        self,
        grid: Grid,
        display: BoardDisplay,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        """
        Args:
            grid: Board to play on, already in its starting position
            display: Output target
            read_line: Prompt-and-read callable (defaults to the display console)
        """
        self.grid = grid
        self.display = display
        self.read_line = read_line or display.console.input
        self.moves_played = 0

    def run(self) -> Tuple[int, int]:
        """
        Play until the session ends.

        Returns:
            Final (dark, light) score
        """
        self.display.show_board(self.grid)
        try:
            while True:
                for number, mover in PLAYERS:
                    if not self.grid.has_legal_move(mover):
                        self.display.log_warning(
                            f"Player {number} ({mover.glyph}) has no legal move. Game stopped."
                        )
                        return self._finish()
                    if not self.take_turn(number, mover):
                        return self._finish()
        except EOFError:
            logger.info("Input closed after %d move(s)", self.moves_played)
            return self._finish()

    def take_turn(self, number: int, mover: Token) -> bool:
        """
        Prompt one player until they make a legal move.

        Returns:
            False if the player asked to quit
        """
        prompt = TURN_PROMPT.format(number=number, tag=mover.glyph)
        while True:
            line = self.read_line(prompt)
            if line.strip().lower() in QUIT_COMMANDS:
                logger.info("Player %d quit", number)
                return False

            try:
                row, column, coin = parse_move(line)
            except InputError as exc:
                self.display.log_error(str(exc))
                continue

            try:
                coin_token = Token.from_tag(coin)
            except InvalidTokenError:
                coin_token = None
            if coin_token is not mover:
                self.display.log_error(f"Invalid character! Only '{mover.glyph}' is allowed")
                continue

            try:
                flipped = play_move(self.grid, row, column, mover)
            except IllegalMoveError:
                self.display.log_error("Invalid move. Try again.")
                continue
            except CoordinateOutOfRange as exc:
                self.display.log_error(str(exc))
                continue

            self.moves_played += 1
            logger.info(
                "Player %d placed %s at (%d, %d), flipped %d", number, mover.glyph, row, column, len(flipped)
            )
            self.display.show_board(self.grid)
            return True

    def _finish(self) -> Tuple[int, int]:
        self.display.show_score(self.grid)
        return self.grid.score()
