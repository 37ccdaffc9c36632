from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .board import Board, Marker
from .moves import Move, Score

HUMAN = Marker.PLAYER_ONE
BOT = Marker.PLAYER_TWO


@dataclass(frozen=True)
class GameState:
    """Represents one game session: the board, whose turn it is, the running score and the pass count."""
    board: Board
    active: Marker
    score: Score  # (PLAYER_ONE, PLAYER_TWO)
    terminal: bool = False
    passes: int = 0  # consecutive passes; two end the game
    last_moves: Tuple[Move, ...] = ()  # moves applied by the most recent transition

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def evolve(self, **changes) -> 'GameState':
        return replace(self, **changes)
