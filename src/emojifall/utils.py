"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .config import DEFAULT_CONFIG, EngineConfig
from .tetromino import Shape, Tetromino


def drop_interval_ms(level: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    """Return the fall interval in milliseconds for ``level``.

    Each level above the first shortens the interval by a fixed step until
    it reaches the configured floor.
    """

    steps = max(0, level - 1)
    interval = config.initial_drop_interval_ms - steps * config.drop_interval_step_ms
    return max(config.min_drop_interval_ms, interval)


def line_clear_score(cleared: int, level: int, config: EngineConfig = DEFAULT_CONFIG) -> int:
    """Return the points for clearing ``cleared`` rows at ``level``."""

    return cleared * config.points_per_line * level


def can_move(
    board: Board,
    tetromino: Tetromino,
    dx: int,
    dy: int,
    matrix: Optional[Shape] = None,
) -> bool:
    """Return ``True`` if ``tetromino`` can move by ``dx`` and ``dy`` on ``board``.

    ``matrix`` replaces the piece's own shape, which lets the same check
    validate rotations before they are applied.
    """

    row, col = tetromino.position
    shape = tetromino.matrix if matrix is None else matrix
    return not board.collides(shape, row + dy, col + dx)


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells of the active piece above the board are left out.
    """

    grid = [[int(v) for v in row] for row in board.grid]
    if active is not None:
        for r, c in active.blocks():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = active.value
    return grid
