"""Tests for move rules and tokens."""

import pytest
from reversi_board.core import (
    CoordinateOutOfRange,
    DimensionError,
    IllegalMoveError,
    InvalidTokenError,
    Token,
    create_starting_grid,
    opponent_of,
    play_move,
)


def test_create_starting_grid():
    """Starting grid has the four centre tokens."""
    grid = create_starting_grid(8, 8)

    assert grid.score() == (2, 2)
    assert grid.get(3, 3) is Token.DARK
    assert grid.get(4, 4) is Token.DARK
    assert grid.get(3, 4) is Token.LIGHT
    assert grid.get(4, 3) is Token.LIGHT


def test_create_starting_grid_rejects_odd_size():
    with pytest.raises(DimensionError):
        create_starting_grid(7, 8)


def test_play_move_places_and_flips():
    grid = create_starting_grid(8, 8)

    flipped = play_move(grid, 2, 4, Token.DARK)

    assert flipped == [(3, 4)]
    assert grid.get(2, 4) is Token.DARK
    assert grid.score() == (4, 1)


def test_play_move_sequence():
    """A short opening: dark (2,4), light (2,3), dark (2,2)."""
    grid = create_starting_grid(8, 8)

    play_move(grid, 2, 4, Token.DARK)
    # Light at (2,3) brackets (3,3) southward against (4,3)
    assert play_move(grid, 2, 3, Token.LIGHT) == [(3, 3)]
    assert grid.score() == (3, 3)

    # Dark at (2,2) brackets (3,3) against (4,4) and (2,3) against (2,4)
    assert sorted(play_move(grid, 2, 2, Token.DARK)) == [(2, 3), (3, 3)]
    assert grid.score() == (6, 1)


def test_illegal_move_raises_and_leaves_grid_alone():
    grid = create_starting_grid(8, 8)
    before = grid.snapshot()

    with pytest.raises(IllegalMoveError) as excinfo:
        play_move(grid, 0, 0, Token.DARK)

    assert excinfo.value.row == 0
    assert excinfo.value.mover is Token.DARK
    assert grid.snapshot() == before


def test_play_move_on_occupied_cell():
    grid = create_starting_grid(8, 8)

    with pytest.raises(IllegalMoveError):
        play_move(grid, 3, 3, Token.LIGHT)


def test_play_move_off_grid():
    grid = create_starting_grid(4, 4)

    with pytest.raises(CoordinateOutOfRange):
        play_move(grid, 4, 0, Token.DARK)


def test_opponent():
    assert opponent_of(Token.DARK) is Token.LIGHT
    assert opponent_of(Token.LIGHT) is Token.DARK
    assert Token.DARK.opponent.opponent is Token.DARK

    with pytest.raises(InvalidTokenError):
        Token.EMPTY.opponent


def test_token_glyphs():
    assert Token.EMPTY.glyph == "."
    assert Token.DARK.glyph == "x"
    assert Token.LIGHT.glyph == "o"
    assert not Token.EMPTY.is_colour
    assert Token.DARK.is_colour and Token.LIGHT.is_colour


@pytest.mark.parametrize("tag,expected", [("x", Token.DARK), ("o", Token.LIGHT), (" X ", Token.DARK), ("O", Token.LIGHT)])
def test_from_tag(tag, expected):
    assert Token.from_tag(tag) is expected


@pytest.mark.parametrize("tag", [".", "", "xo", "b"])
def test_from_tag_rejects_unknown(tag):
    with pytest.raises(InvalidTokenError):
        Token.from_tag(tag)
