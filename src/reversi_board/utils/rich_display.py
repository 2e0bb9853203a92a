"""
Board rendering and rich-based console output.

``render`` turns any board view into plain text:

      0 1 2 3
    0 . . . .
    1 . x o .
    2 . o x .
    3 . . . .

A board view is anything exposing ``rows``, ``columns`` and
``get(row, column)``; both ``Grid`` and ``GridSnapshot`` qualify. Nothing
in this module mutates a board.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..core import Token

default_console = Console()

TOKEN_STYLES = {
    Token.EMPTY: "dim",
    Token.DARK: "bold red",
    Token.LIGHT: "bold cyan",
}


def _index_width(view) -> int:
    return len(str(max(view.rows, view.columns) - 1))


def _header_line(view, width: int) -> str:
    """Column indices, offset past the row-index column."""
    return " " * width + " " + " ".join(f"{c:>{width}}" for c in range(view.columns))


def render(view) -> str:
    """
    Render a board view as text.

    Args:
        view: Object with ``rows``, ``columns`` and ``get(row, column)``

    Returns:
        Header line of column indices followed by one line per row
    """
    width = _index_width(view)
    lines = [_header_line(view, width)]
    for r in range(view.rows):
        glyphs = " ".join(f"{view.get(r, c).glyph:>{width}}" for c in range(view.columns))
        lines.append(f"{r:>{width}} {glyphs}")
    return "\n".join(lines)


class BoardDisplay:
    """
    Console output for an interactive session.

    Shows:
    - Session header
    - The board, with one style per token
    - Score line
    - Info/success/warning/error messages
    """

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        """
        Initialize board display.

        Args:
            console: Console to print to (defaults to the shared module console)
            color: Style tokens when printing the board
        """
        self.console = console if console is not None else default_console
        self.color = color

    def log(self, message: str, style: str = ""):
        """Print a plain message."""
        self.console.print(escape(message), style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {escape(message)}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_header(self, title: str, rows: int, columns: int):
        """Show session header."""
        self.console.rule(f"[bold blue]{escape(title)}[/bold blue]")
        self.console.print(f"Board: {rows}x{columns}")
        self.console.print()

    def show_board(self, view):
        """Print the board, styling each glyph when colour is on."""
        if not self.color:
            self.console.print(render(view), markup=False, highlight=False)
            self.console.print()
            return

        width = _index_width(view)
        self.console.print(Text(_header_line(view, width), style="bold"))
        for r in range(view.rows):
            line = Text(f"{r:>{width}}", style="bold")
            for c in range(view.columns):
                token = view.get(r, c)
                line.append(" ")
                line.append(f"{token.glyph:>{width}}", style=TOKEN_STYLES[token])
            self.console.print(line)
        self.console.print()

    def show_score(self, view):
        dark = view.count(Token.DARK)
        light = view.count(Token.LIGHT)
        self.console.print(f"Score - Dark (x): {dark}, Light (o): {light}", highlight=False)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=default_console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
