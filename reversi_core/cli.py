from __future__ import annotations

import argparse
import logging

from .board import Marker, coord_to_str, parse_coord
from .config import default_board_size, parse_dimension
from .engine import (
    legal_moves_for,
    new_game,
    pass_human_turn,
    play_human_move,
    play_out,
    run_automated_turn,
    winner,
)
from .errors import MalformedCoordinate
from .state import BOT, GameState

_NAMES = {Marker.PLAYER_ONE: 'X (you)', Marker.PLAYER_TWO: 'O (bot)'}


def _show(state: GameState) -> None:
    print(state.board.pretty())
    print(f"Score  X: {state.score[0]}  O: {state.score[1]}")


def _announce_result(state: GameState) -> None:
    w = winner(state)
    print('Game over. ' + ('Draw.' if w is None else f"{_NAMES[w]} wins!"))


def prompt_human_move(state: GameState) -> GameState:
    """Reads moves from stdin until one changes the state."""
    moves = legal_moves_for(state)
    if not moves:
        print('You have no legal move and must pass.')
        return pass_human_turn(state)
    print('Your legal moves:', ' '.join(coord_to_str(c) for c in moves))
    while True:
        text = input('Enter your move as x,y: ').strip()
        try:
            coord = parse_coord(text, state.width, state.height)
        except MalformedCoordinate as e:
            print(f'Could not parse ({e}). Try again.')
            continue
        nxt = play_human_move(state, coord)
        if nxt is not state:
            return nxt
        print('Illegal move. Try again.')


def main() -> None:
    width, height = default_board_size()
    parser = argparse.ArgumentParser(description='Reversi against a positional bot')
    parser.add_argument('--width', default=str(width), help='Board width (4..26)')
    parser.add_argument('--height', default=str(height), help='Board height (4..26)')
    parser.add_argument('--watch', action='store_true', help='Let the bot play both sides and show the result')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log passes and game end')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    state = new_game(parse_dimension(args.width, width), parse_dimension(args.height, height))
    print('Initial board:')
    _show(state)

    if args.watch:
        final = play_out(state)
        print(f'\nSelf-play finished after {len(final.last_moves)} moves:')
        _show(final)
        _announce_result(final)
        return

    while not state.terminal:
        if state.active == BOT:
            state = run_automated_turn(state)
            for mv in state.last_moves:
                print(f"Bot plays {coord_to_str(mv.coord)} flipping {len(mv.captures)}")
            if not state.last_moves:
                print('Bot has no legal move and passes.')
        else:
            state = prompt_human_move(state)
        _show(state)
    _announce_result(state)
