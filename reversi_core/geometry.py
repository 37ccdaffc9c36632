from __future__ import annotations

import enum

from .board import Coord


class Tier(enum.IntEnum):
    """Positional category of a cell. Lower values are preferred by the bot."""
    CORNER = 0
    EDGE = 1
    INTERIOR = 2
    EDGE_ADJACENT = 3
    CORNER_ADJACENT = 4


def is_corner(coord: Coord, width: int, height: int) -> bool:
    x, y = coord
    return x in (0, width - 1) and y in (0, height - 1)


def is_corner_adjacent(coord: Coord, width: int, height: int) -> bool:
    """True for the three cells touching each corner (the C and X squares)."""
    x, y = coord
    if is_corner(coord, width, height):
        return False
    return (x <= 1 or x >= width - 2) and (y <= 1 or y >= height - 2)


def is_edge(coord: Coord, width: int, height: int) -> bool:
    x, y = coord
    if is_corner(coord, width, height) or is_corner_adjacent(coord, width, height):
        return False
    return x in (0, width - 1) or y in (0, height - 1)


def is_edge_adjacent(coord: Coord, width: int, height: int) -> bool:
    """True for cells one step in from the boundary, outside the corner regions."""
    x, y = coord
    if is_corner_adjacent(coord, width, height):
        return False
    return x in (1, width - 2) or y in (1, height - 2)


def is_interior(coord: Coord, width: int, height: int) -> bool:
    return not (
        is_corner(coord, width, height)
        or is_corner_adjacent(coord, width, height)
        or is_edge(coord, width, height)
        or is_edge_adjacent(coord, width, height)
    )


def classify(coord: Coord, width: int, height: int) -> Tier:
    """Returns the single tier a cell belongs to (boards of at least 4x4)."""
    if is_corner(coord, width, height):
        return Tier.CORNER
    if is_corner_adjacent(coord, width, height):
        return Tier.CORNER_ADJACENT
    if is_edge(coord, width, height):
        return Tier.EDGE
    if is_edge_adjacent(coord, width, height):
        return Tier.EDGE_ADJACENT
    return Tier.INTERIOR
