from __future__ import annotations

# Facade module that re-exports the Reversi core.
# The Flask app and the tests import from here; single-responsibility
# modules live under reversi_core/*.

from reversi_core.board import (  # noqa: F401
    Board,
    Coord,
    Marker,
    check_coord,
    coord_to_str,
    parse_coord,
)
from reversi_core.errors import MalformedCoordinate, ReversiError  # noqa: F401
from reversi_core.geometry import (  # noqa: F401
    Tier,
    classify,
    is_corner,
    is_corner_adjacent,
    is_edge,
    is_edge_adjacent,
    is_interior,
)
from reversi_core.moves import (  # noqa: F401
    DIRECTIONS,
    Move,
    MoveSet,
    Score,
    apply_move,
    captures_for,
    has_legal_move,
    legal_moves,
    score_after,
)
from reversi_core.ai import choose_move, group_by_tier  # noqa: F401
from reversi_core.state import BOT, HUMAN, GameState  # noqa: F401
from reversi_core.engine import (  # noqa: F401
    is_terminal,
    legal_moves_for,
    new_game,
    pass_human_turn,
    play_human_move,
    play_out,
    run_automated_turn,
    score,
    winner,
)
from reversi_core.config import board_size_from, default_board_size, parse_dimension  # noqa: F401


def main() -> None:
    # CLI driver delegated to reversi_core.cli
    from reversi_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
