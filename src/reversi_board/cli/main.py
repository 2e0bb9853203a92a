"""
Main CLI for the Reversi board.
"""

import argparse
import logging
import sys

from ..core import ReversiError, Token, create_starting_grid
from ..utils.rich_display import BoardDisplay, render, setup_rich_logging
from .session import ConsoleSession, prompt_starting_grid

DEFAULT_SIZE = 8


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _starting_grid(rows: int, columns: int, display: BoardDisplay):
    """Build the starting grid, reporting bad sizes and exiting with 1."""
    try:
        return create_starting_grid(rows, columns)
    except ReversiError as exc:
        display.log_error(str(exc))
        sys.exit(1)


def play_command(args):
    """Play an interactive two-player game."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    display = BoardDisplay(color=not args.no_color)
    display.log("ReversiBoard started.")
    display.log("")

    if args.rows is None:
        try:
            grid = prompt_starting_grid(display.console.input, display)
        except EOFError:
            logger.info("Input closed before a board size was given")
            return
    else:
        grid = _starting_grid(args.rows, args.columns, display)

    rows, columns = grid.dimensions
    display.show_header(f"Reversi {rows}x{columns}", rows, columns)
    logger.info(f"Starting session on {rows}x{columns} board")

    session = ConsoleSession(grid, display)
    dark, light = session.run()

    if dark > light:
        display.log_success(f"Dark (x) leads {dark} to {light}")
    elif light > dark:
        display.log_success(f"Light (o) leads {light} to {dark}")
    else:
        display.log_success(f"Level at {dark} each")


def show_command(args):
    """Print the starting position."""
    setup_logging(args.log_level)

    display = BoardDisplay(color=False)
    grid = _starting_grid(args.rows, args.columns, display)
    print(render(grid))


def moves_command(args):
    """List the legal opening moves for one colour."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    display = BoardDisplay(color=False)
    grid = _starting_grid(args.rows, args.columns, display)
    mover = Token.from_tag(args.color)

    moves = grid.legal_moves(mover)
    logger.info(f"{len(moves)} legal move(s) for {mover.name}")
    for row, column in moves:
        flipped = grid.captures(row, column, mover)
        print(f"{row} {column} (flips {len(flipped)})")


def _add_size_arguments(parser, default):
    parser.add_argument("--rows", type=int, default=default, help="Number of board rows")
    parser.add_argument("--columns", type=int, default=default, help="Number of board columns")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Reversi board")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a two-player game on the console")
    _add_size_arguments(play_parser, None)
    play_parser.add_argument(
        "--no-color", action="store_true", help="Print the board without styling"
    )
    play_parser.set_defaults(func=play_command)

    # Show command
    show_parser = subparsers.add_parser("show", help="Print the starting position")
    _add_size_arguments(show_parser, DEFAULT_SIZE)
    show_parser.set_defaults(func=show_command)

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal opening moves for a colour")
    _add_size_arguments(moves_parser, DEFAULT_SIZE)
    moves_parser.add_argument(
        "--color", choices=["x", "o"], required=True, help="Colour to move (x = dark, o = light)"
    )
    moves_parser.set_defaults(func=moves_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "play" and (args.rows is None) != (args.columns is None):
        play_parser.error("--rows and --columns must be given together")

    args.func(args)


if __name__ == "__main__":
    main()
