from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .ai import choose_move
from .board import Board, Coord, Marker
from .moves import Move, MoveSet, Score, apply_move, has_legal_move, legal_moves, score_after
from .state import BOT, HUMAN, GameState

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8


def new_game(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> GameState:
    """Starts a fresh game with the human side to move."""
    board = Board.initial(width, height)
    return GameState(board=board, active=HUMAN, score=(2, 2))


def legal_moves_for(state: GameState) -> MoveSet:
    """Legal moves of the side to move; none once the game is over."""
    if state.terminal:
        return {}
    return legal_moves(state.board, state.active)


def _play(state: GameState, player: Marker, coord: Coord, captures: Tuple[Coord, ...]) -> GameState:
    board, captured = apply_move(state.board, player, coord, captures)
    return state.evolve(
        board=board,
        score=score_after(state.score, player, captured),
        passes=0,
    )


def play_human_move(state: GameState, coord: Coord) -> GameState:
    """
    Applies the human's move and hands the turn to the bot.
    Any click that is not a legal move returns `state` unchanged.
    """
    if state.terminal or state.active != HUMAN:
        return state
    coord = (int(coord[0]), int(coord[1]))
    captures = legal_moves(state.board, HUMAN).get(coord)
    if not captures:
        return state
    nxt = _play(state, HUMAN, coord, captures)
    return nxt.evolve(active=BOT, last_moves=(Move(HUMAN, coord, captures),))


def pass_human_turn(state: GameState) -> GameState:
    """Forfeits the human's turn, only when the human has no legal move."""
    if state.terminal or state.active != HUMAN:
        return state
    if has_legal_move(state.board, HUMAN):
        return state
    passes = state.passes + 1
    logger.debug("Human passes (consecutive passes: %d)", passes)
    if passes >= 2:
        logger.info("Game over after double pass, score %s", state.score)
        return state.evolve(passes=passes, terminal=True, last_moves=())
    return state.evolve(active=BOT, passes=passes, last_moves=())


def run_automated_turn(state: GameState) -> GameState:
    """
    Plays the bot's turn. When the bot moves and the human is then left
    without a move, the human passes and the bot moves again. Two passes in a
    row end the game. Returns once the human can move or the game is over.
    """
    if state.terminal or state.active != BOT:
        return state
    applied: List[Move] = []
    passes = state.passes
    while True:
        bot_moves = legal_moves(state.board, BOT)
        coord = choose_move(bot_moves, state.width, state.height)
        if coord is None:
            passes += 1
            logger.debug("Bot passes (consecutive passes: %d)", passes)
        else:
            captures = bot_moves[coord]
            state = _play(state, BOT, coord, captures)
            applied.append(Move(BOT, coord, captures))
            passes = 0
        if passes >= 2:
            break
        if has_legal_move(state.board, HUMAN):
            return state.evolve(active=HUMAN, passes=passes, last_moves=tuple(applied))
        passes += 1
        logger.debug("Human has no move and passes (consecutive passes: %d)", passes)
        if passes >= 2:
            break
    logger.info("Game over after double pass, score %s", state.score)
    return state.evolve(terminal=True, passes=passes, last_moves=tuple(applied))


def play_out(state: GameState) -> GameState:
    """Lets the heuristic play both sides until neither can move."""
    applied: List[Move] = []
    passes = state.passes
    while not state.terminal:
        player = state.active
        moves = legal_moves(state.board, player)
        coord = choose_move(moves, state.width, state.height)
        if coord is None:
            passes += 1
            state = state.evolve(passes=passes)
            if passes >= 2:
                logger.info("Game over after double pass, score %s", state.score)
                state = state.evolve(terminal=True)
                break
        else:
            state = _play(state, player, coord, moves[coord])
            applied.append(Move(player, coord, moves[coord]))
            passes = 0
        state = state.evolve(active=player.opponent())
    return state.evolve(last_moves=tuple(applied))


def is_terminal(state: GameState) -> bool:
    return state.terminal


def score(state: GameState) -> Score:
    return state.score


def winner(state: GameState) -> Optional[Marker]:
    """The side with more pieces at the end of the game; None while playing or on a draw."""
    if not state.terminal:
        return None
    one, two = state.score
    if one == two:
        return None
    return Marker.PLAYER_ONE if one > two else Marker.PLAYER_TWO
