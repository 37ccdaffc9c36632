from __future__ import annotations


class ReversiError(Exception):
    """Base class for errors raised by the Reversi engine."""


class MalformedCoordinate(ReversiError, ValueError):
    """A coordinate could not be decoded, or lies outside the board."""
