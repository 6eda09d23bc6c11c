"""Tetromino definitions and the piece factory.

Every shape is stored as a 4x4 matrix whose non-zero cells hold the piece's
identifier.  Using the same matrix size for all seven shapes keeps rotation
uniform: a rotation is a plain matrix transform around the matrix centre and
never needs per-shape offsets.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

import numpy as np

Shape = Tuple[Tuple[int, ...], ...]

# Side length of every shape matrix.
SHAPE_SIZE = 4


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Mapping from ``TetrominoType`` to the integer stored in the grid.  ``0`` is
# reserved for an empty cell.
PIECE_VALUES: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}


def _shape(rows: Sequence[str], value: int) -> Shape:
    return tuple(tuple(value if ch == "#" else 0 for ch in row) for row in rows)


# Spawn orientation of each shape.
TETROMINO_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _shape(["....", "####", "....", "...."], PIECE_VALUES[TetrominoType.I]),
    TetrominoType.O: _shape(["....", ".##.", ".##.", "...."], PIECE_VALUES[TetrominoType.O]),
    TetrominoType.T: _shape([".#..", "###.", "....", "...."], PIECE_VALUES[TetrominoType.T]),
    TetrominoType.S: _shape([".##.", "##..", "....", "...."], PIECE_VALUES[TetrominoType.S]),
    TetrominoType.Z: _shape(["##..", ".##.", "....", "...."], PIECE_VALUES[TetrominoType.Z]),
    TetrominoType.J: _shape(["#...", "###.", "....", "...."], PIECE_VALUES[TetrominoType.J]),
    TetrominoType.L: _shape(["..#.", "###.", "....", "...."], PIECE_VALUES[TetrominoType.L]),
}


def rotate_clockwise(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    The cell at ``(row, col)`` moves to ``(col, N - 1 - row)``.  The input is
    not modified and four rotations give back the original matrix.
    """

    rotated = np.rot90(np.asarray(shape, dtype=np.uint8), k=-1)
    return tuple(tuple(int(v) for v in row) for row in rotated)


def occupied_cells(shape: Shape) -> List[Tuple[int, int]]:
    """Return the ``(row, col)`` offsets of the non-zero cells of ``shape``."""

    return [(r, c) for r, row in enumerate(shape) for c, value in enumerate(row) if value]


@dataclass
class Tetromino:
    """Active or upcoming piece in the game."""

    kind: TetrominoType
    matrix: Shape
    position: Tuple[int, int] = (0, 0)  # (row, col)

    @classmethod
    def of(cls, kind: TetrominoType, position: Tuple[int, int] = (0, 0)) -> "Tetromino":
        """Create a piece of ``kind`` in its spawn orientation."""

        return cls(kind, TETROMINO_SHAPES[kind], position)

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.kind]

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by the given offsets.

        ``dx`` moves horizontally (columns) and ``dy`` moves vertically
        (rows).  The piece's position is stored as ``(row, col)``.
        """

        row, col = self.position
        self.position = (row + dy, col + dx)

    def rotated(self) -> Shape:
        """Return this piece's matrix rotated clockwise without applying it."""

        return rotate_clockwise(self.matrix)

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global block coordinates for this piece."""

        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in occupied_cells(self.matrix)]


class Chooser(Protocol):
    def choice(self, seq: Sequence[TetrominoType]) -> TetrominoType: ...


class PieceFactory:
    """Produce random pieces from an injectable source of randomness."""

    def __init__(self, rng: Optional[Chooser] = None, *, seed: Optional[int] = None) -> None:
        if rng is None:
            rng = random.Random(seed)
        self._rng = rng
        self._types = list(TetrominoType)

    def random_piece(self) -> Tetromino:
        """Return a uniformly chosen piece at anchor ``(0, 0)``."""

        return Tetromino.of(self._rng.choice(self._types))
