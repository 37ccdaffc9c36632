from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import MalformedCoordinate

Coord = Tuple[int, int]  # (x, y): column, row

MIN_SIZE = 4


class Marker(enum.IntEnum):
    """Occupancy of a single cell."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    def opponent(self) -> 'Marker':
        if self is Marker.PLAYER_ONE:
            return Marker.PLAYER_TWO
        if self is Marker.PLAYER_TWO:
            return Marker.PLAYER_ONE
        raise ValueError('EMPTY has no opponent')


_SYMBOLS = {Marker.EMPTY: '.', Marker.PLAYER_ONE: 'X', Marker.PLAYER_TWO: 'O'}
_FROM_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


@dataclass(frozen=True)
class Board:
    """Represents a width x height grid of markers, stored row-major."""
    width: int
    height: int
    grid: Tuple[Marker, ...]  # length == width * height

    @classmethod
    def empty(cls, width: int, height: int) -> 'Board':
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(f'Board must be at least {MIN_SIZE}x{MIN_SIZE}, got {width}x{height}')
        return cls(width=width, height=height, grid=(Marker.EMPTY,) * (width * height))

    @classmethod
    def initial(cls, width: int, height: int) -> 'Board':
        """Creates a board with the four centre cells occupied diagonally."""
        board = cls.empty(width, height)
        hw, hh = width // 2, height // 2
        board = board.with_markers([(hw - 1, hh - 1), (hw, hh)], Marker.PLAYER_TWO)
        return board.with_markers([(hw, hh - 1), (hw - 1, hh)], Marker.PLAYER_ONE)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Builds a board from text rows using '.', 'X' and 'O'."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cells: List[Marker] = []
        for row in rows:
            if len(row) != width:
                raise ValueError('All rows must have the same length')
            try:
                cells.extend(_FROM_SYMBOL[ch] for ch in row)
            except KeyError as e:
                raise ValueError(f'Unknown cell symbol {e.args[0]!r}') from None
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(f'Board must be at least {MIN_SIZE}x{MIN_SIZE}, got {width}x{height}')
        return cls(width=width, height=height, grid=tuple(cells))

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Marker:
        return self.grid[self.index(x, y)]

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def count(self, marker: Marker) -> int:
        return sum(1 for cell in self.grid if cell == marker)

    def occupied(self) -> int:
        return len(self.grid) - self.count(Marker.EMPTY)

    def with_markers(self, coords: Iterable[Coord], marker: Marker) -> 'Board':
        """Returns a copy of the board with every coordinate in `coords` set to `marker`."""
        cells = list(self.grid)
        for x, y in coords:
            cells[self.index(x, y)] = marker
        return Board(self.width, self.height, tuple(cells))

    def rows(self) -> List[List[int]]:
        return [[int(self.at(x, y)) for x in range(self.width)] for y in range(self.height)]

    def pretty(self) -> str:
        """Generates a human-readable grid with column and row labels."""
        header = '   ' + ' '.join(str(x % 10) for x in range(self.width))
        lines: List[str] = [header]
        for y in range(self.height):
            row = ' '.join(_SYMBOLS[self.at(x, y)] for x in range(self.width))
            lines.append(f'{y:>2} {row}')
        return '\n'.join(lines)


def coord_to_str(c: Coord) -> str:
    return f"{c[0]},{c[1]}"


def parse_coord(text: str, width: int, height: int) -> Coord:
    """Decodes an "x,y" string into a coordinate on a width x height board."""
    parts = [p.strip() for p in str(text).split(',')]
    if len(parts) != 2:
        raise MalformedCoordinate(f'Expected two comma-separated integers, got {text!r}')
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedCoordinate(f'Coordinate is not numeric: {text!r}') from None
    return check_coord((x, y), width, height)


def check_coord(c: Coord, width: int, height: int) -> Coord:
    x, y = c
    if not (0 <= x < width and 0 <= y < height):
        raise MalformedCoordinate(f'Coordinate {coord_to_str(c)} is outside a {width}x{height} board')
    return (x, y)
