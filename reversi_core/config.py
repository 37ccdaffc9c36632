from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional, Tuple

from .board import MIN_SIZE
from .engine import DEFAULT_HEIGHT, DEFAULT_WIDTH

logger = logging.getLogger(__name__)

MAX_SIZE = 26


def parse_dimension(value: Any, default: int) -> int:
    """Reads a board dimension, falling back to `default` for anything unusable."""
    if value is None or value == "":
        return default
    try:
        n = int(str(value).strip())
    except ValueError:
        logger.warning("Ignoring non-numeric board dimension %r, using %d", value, default)
        return default
    if not MIN_SIZE <= n <= MAX_SIZE:
        logger.warning("Board dimension %d outside %d..%d, using %d", n, MIN_SIZE, MAX_SIZE, default)
        return default
    return n


def default_board_size() -> Tuple[int, int]:
    """Board size from REVERSI_WIDTH / REVERSI_HEIGHT, 8x8 when unset."""
    width = parse_dimension(os.getenv("REVERSI_WIDTH"), DEFAULT_WIDTH)
    height = parse_dimension(os.getenv("REVERSI_HEIGHT"), DEFAULT_HEIGHT)
    return width, height


def board_size_from(params: Optional[Mapping[str, Any]], fallback: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
    """Resolves width/height from request parameters over the configured defaults."""
    width, height = fallback or default_board_size()
    params = params or {}
    return parse_dimension(params.get("width"), width), parse_dimension(params.get("height"), height)
