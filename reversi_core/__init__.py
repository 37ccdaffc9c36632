"""
Reversi core Python package.

This package contains the rules engine and the heuristic opponent used by
game.py, app.py and the command-line driver.
Modules:
- board.py: Board, Marker, Coord and the "x,y" coordinate codec
- geometry.py: positional tiers (corner, edge, interior, ...)
- moves.py: capture rays, legal moves, move application
- ai.py: one-ply positional move selection
- state.py: GameState
- engine.py: turn/pass sequencing and the public game contract
- config.py: board-size configuration
"""
