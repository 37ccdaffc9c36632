from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .board import Coord
from .geometry import Tier, classify
from .moves import MoveSet

# True: take the move with the most captures; False: the fewest.
_PREFER_MOST: Dict[Tier, bool] = {
    Tier.CORNER: True,
    Tier.EDGE: True,
    Tier.INTERIOR: False,
    Tier.EDGE_ADJACENT: False,
    Tier.CORNER_ADJACENT: False,
}


def _row_major(coord: Coord) -> Tuple[int, int]:
    x, y = coord
    return (y, x)


def group_by_tier(move_set: MoveSet, width: int, height: int) -> Dict[Tier, List[Coord]]:
    """Buckets the legal moves by positional tier, each bucket in row-major order."""
    buckets: Dict[Tier, List[Coord]] = {tier: [] for tier in Tier}
    for coord in sorted(move_set, key=_row_major):
        buckets[classify(coord, width, height)].append(coord)
    return buckets


def choose_move(move_set: MoveSet, width: int, height: int) -> Optional[Coord]:
    """
    Picks a move by positional tier (corner, edge, interior, edge-adjacent,
    corner-adjacent); the first non-empty tier wins. Corner and edge moves
    maximise the capture count, the rest minimise it. Ties go to the
    topmost, then leftmost, coordinate. Returns None for an empty move set.
    """
    buckets = group_by_tier(move_set, width, height)
    for tier in sorted(Tier):
        candidates = buckets[tier]
        if not candidates:
            continue
        sign = -1 if _PREFER_MOST[tier] else 1
        # min() keeps the first of several equal keys
        return min(candidates, key=lambda c: sign * len(move_set[c]))
    return None
