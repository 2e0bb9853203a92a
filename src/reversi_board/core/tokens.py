"""
Cell tokens.

A cell holds one of three tokens. The two colours are the ones the
console protocol tags with ``x`` (dark) and ``o`` (light); dark moves
first.
"""

from enum import Enum

from .errors import InvalidTokenError


class Token(Enum):
    """Content of a single board cell."""

    EMPTY = "."
    DARK = "x"
    LIGHT = "o"

    @property
    def glyph(self) -> str:
        """Single character used when printing the board."""
        return self.value

    @property
    def is_colour(self) -> bool:
        return self is not Token.EMPTY

    @property
    def opponent(self) -> "Token":
        """The other player colour."""
        if self is Token.DARK:
            return Token.LIGHT
        if self is Token.LIGHT:
            return Token.DARK
        raise InvalidTokenError("EMPTY has no opponent")

    @classmethod
    def from_tag(cls, tag: str) -> "Token":
        """
        Parse a console colour tag.

        Args:
            tag: ``x`` for dark or ``o`` for light (case-insensitive)

        Returns:
            Matching colour token
        """
        normalized = tag.strip().lower()
        for token in (cls.DARK, cls.LIGHT):
            if normalized == token.value:
                return token
        raise InvalidTokenError(f"Unknown colour tag {tag!r}, expected 'x' or 'o'")


def ensure_colour(token: Token) -> Token:
    """Validate that ``token`` is one of the two player colours."""
    if not isinstance(token, Token) or not token.is_colour:
        raise InvalidTokenError(f"Mover must be DARK or LIGHT, got {token!r}")
    return token
