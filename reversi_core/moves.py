from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .board import Board, Coord, Marker

MoveSet = Dict[Coord, Tuple[Coord, ...]]
Score = Tuple[int, int]

DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


@dataclass(frozen=True)
class Move:
    """A placement by `player` at `coord` together with the pieces it flips."""
    player: Marker
    coord: Coord
    captures: Tuple[Coord, ...]


def captures_in_direction(board: Board, coord: Coord, dx: int, dy: int, player: Marker) -> List[Coord]:
    """
    Walks from `coord` along (dx, dy) collecting opponent pieces.
    The run only counts if it is closed off by one of `player`'s pieces;
    running off the board or into an empty cell yields nothing.
    """
    run: List[Coord] = []
    x, y = coord
    while True:
        x += dx
        y += dy
        if not board.in_bounds(x, y):
            return []
        cell = board.at(x, y)
        if cell == Marker.EMPTY:
            return []
        if cell == player:
            return run
        run.append((x, y))


def captures_for(board: Board, coord: Coord, player: Marker) -> Tuple[Coord, ...]:
    """
    Finds every opponent piece flipped if `player` placed at `coord`.
    Occupied or off-board cells capture nothing.
    """
    if not board.in_bounds(*coord) or board.at(*coord) != Marker.EMPTY:
        return ()
    flipped: List[Coord] = []
    for dx, dy in DIRECTIONS:
        flipped.extend(captures_in_direction(board, coord, dx, dy, player))
    return tuple(flipped)


def legal_moves(board: Board, player: Marker) -> MoveSet:
    """Calculates all legal moves for `player`, keyed by coordinate in row-major order."""
    moves: MoveSet = {}
    for coord in board.coords():
        flipped = captures_for(board, coord, player)
        if flipped:
            moves[coord] = flipped
    return moves


def has_legal_move(board: Board, player: Marker) -> bool:
    return any(captures_for(board, coord, player) for coord in board.coords())


def apply_move(board: Board, player: Marker, coord: Coord, captures: Iterable[Coord]) -> Tuple[Board, int]:
    """
    Places `player` at `coord` and flips `captures`.
    `captures` must come from captures_for() on the same board; it is not re-checked.
    """
    flipped = list(captures)
    return board.with_markers([coord, *flipped], player), len(flipped)


def score_after(score: Score, player: Marker, captured: int) -> Score:
    """Mover gains the placed piece plus every capture; the opponent loses the captures."""
    one, two = score
    if player == Marker.PLAYER_ONE:
        return (one + 1 + captured, two - captured)
    return (one - captured, two + 1 + captured)
