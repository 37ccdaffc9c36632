from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    Coord,
    GameState,
    MalformedCoordinate,
    Marker,
    Move,
    MoveSet,
    board_size_from,
    check_coord,
    legal_moves,
    legal_moves_for,
    new_game,
    parse_coord,
    pass_human_turn,
    play_human_move,
    run_automated_turn,
    winner,
)
from reversi_core.board import MIN_SIZE
from reversi_core.config import MAX_SIZE
from reversi_core.state import HUMAN

logger = logging.getLogger(__name__)

app = Flask(__name__)


class BadState(ValueError):
    """The posted state could not be decoded."""


# ---------- JSON codec ----------

def _coord_to_json(c) -> List[int]:
    return [int(c[0]), int(c[1])]


def _move_to_json(m: Move) -> Dict[str, Any]:
    return {
        "player": int(m.player),
        "move": _coord_to_json(m.coord),
        "captures": [_coord_to_json(c) for c in m.captures],
    }


def move_set_to_json(moves: MoveSet) -> List[Dict[str, Any]]:
    return [
        {"move": _coord_to_json(c), "captures": [_coord_to_json(x) for x in caps]}
        for c, caps in moves.items()
    ]


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "width": s.width,
        "height": s.height,
        "grid": s.board.rows(),
        "active": int(s.active),
        "score": [int(s.score[0]), int(s.score[1])],
        "terminal": bool(s.terminal),
        "passes": int(s.passes),
        "lastMoves": [_move_to_json(m) for m in s.last_moves],
    }


def json_to_state(obj: Any) -> GameState:
    """Decodes a posted state. The score is recounted from the grid."""
    if not isinstance(obj, dict):
        raise BadState("state required")
    try:
        width = int(obj["width"])
        height = int(obj["height"])
        rows = obj["grid"]
        if not (MIN_SIZE <= width <= MAX_SIZE and MIN_SIZE <= height <= MAX_SIZE):
            raise BadState(f"board sides must be between {MIN_SIZE} and {MAX_SIZE}")
        if len(rows) != height or any(len(r) != width for r in rows):
            raise BadState("grid does not match width/height")
        cells = tuple(Marker(int(v)) for r in rows for v in r)
        board = Board(width=width, height=height, grid=cells)
        active = Marker(int(obj.get("active", int(HUMAN))))
        if active == Marker.EMPTY:
            raise BadState("active must be 1 or 2")
        passes = int(obj.get("passes", 0))
        terminal = obj.get("terminal", False)
        if not isinstance(terminal, bool):
            raise BadState("terminal must be a JSON boolean")
    except BadState:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise BadState(f"bad state: {e}") from e
    return GameState(
        board=board,
        active=active,
        score=(board.count(Marker.PLAYER_ONE), board.count(Marker.PLAYER_TWO)),
        terminal=terminal,
        passes=max(0, min(passes, 2)),
    )


def _decode_move(raw: Any, s: GameState) -> Coord:
    if isinstance(raw, str):
        return parse_coord(raw, s.width, s.height)
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        try:
            coord = (int(raw[0]), int(raw[1]))
        except (TypeError, ValueError):
            raise MalformedCoordinate(f"Coordinate is not numeric: {raw!r}") from None
        return check_coord(coord, s.width, s.height)
    raise MalformedCoordinate(f"Expected [x, y] or \"x,y\", got {raw!r}")


def _winner_json(s: GameState) -> Optional[int]:
    w = winner(s)
    return int(w) if w is not None else None


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


@app.errorhandler(BadState)
def _bad_state(e: BadState) -> Any:
    logger.warning("Rejected state payload: %s", e)
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(MalformedCoordinate)
def _bad_coord(e: MalformedCoordinate) -> Any:
    logger.warning("Rejected coordinate: %s", e)
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    params: Dict[str, Any] = dict(_body())
    params.update({k: v for k, v in request.args.items() if k in ("width", "height")})
    width, height = board_size_from(params)
    state = new_game(width, height)
    return jsonify({
        "ok": True,
        "state": state_to_json(state),
        "legalMoves": move_set_to_json(legal_moves_for(state)),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    state = json_to_state(_body().get("state"))
    return jsonify({"ok": True, "legalMoves": move_set_to_json(legal_moves_for(state))})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    state = json_to_state(body.get("state"))
    move = _decode_move(body.get("move"), state)
    next_state = play_human_move(state, move)
    changed = next_state is not state
    return jsonify({
        "ok": True,
        "changed": changed,
        "state": state_to_json(next_state),
        "legalMoves": move_set_to_json(legal_moves_for(next_state)),
    })


@app.post("/api/pass")
def api_pass() -> Any:
    state = json_to_state(_body().get("state"))
    next_state = pass_human_turn(state)
    return jsonify({
        "ok": True,
        "changed": next_state is not state,
        "state": state_to_json(next_state),
        "terminal": next_state.terminal,
        "winner": _winner_json(next_state),
    })


@app.post("/api/ai")
def api_ai() -> Any:
    state = json_to_state(_body().get("state"))
    next_state = run_automated_turn(state)
    human_moves = {} if next_state.terminal else legal_moves(next_state.board, HUMAN)
    return jsonify({
        "ok": True,
        "moves": [_move_to_json(m) for m in next_state.last_moves],
        "state": state_to_json(next_state),
        "legalMoves": move_set_to_json(human_moves),
        "terminal": next_state.terminal,
        "winner": _winner_json(next_state),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")), debug=debug)
