"""Display utilities for the Reversi board."""

from .rich_display import (
    BoardDisplay,
    render,
    setup_rich_logging,
)

__all__ = [
    "BoardDisplay",
    "render",
    "setup_rich_logging",
]
