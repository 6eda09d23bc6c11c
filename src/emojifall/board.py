"""Board representation for the playfield."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .tetromino import Shape, Tetromino, occupied_cells


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]


def create_empty_grid(height: int = HEIGHT, width: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Board holding the locked cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(height, width)

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def collides(self, matrix: Shape, row: int, col: int) -> bool:
        """Return ``True`` if ``matrix`` anchored at ``(row, col)`` collides.

        Cells left of, right of or below the board collide.  Cells above the
        board never do, so pieces may hang over the top edge.  Cells inside the
        board collide when the target cell is already occupied.
        """

        for dr, dc in occupied_cells(matrix):
            r = row + dr
            c = col + dc
            if c < 0 or c >= self.width or r >= self.height:
                return True
            if r >= 0 and self.grid[r, c] != 0:
                return True
        return False

    def drop_distance(self, tetromino: Tetromino) -> int:
        """Return how many rows ``tetromino`` can fall before it collides."""

        row, col = tetromino.position
        distance = 0
        while not self.collides(tetromino.matrix, row + distance + 1, col):
            distance += 1
        return distance

    def lock_piece(self, tetromino: Tetromino) -> int:
        """Lock the tetromino's blocks into the board grid.

        Only cells inside the board are written.  Returns the number of cells
        that were discarded because they sat outside, typically above the top
        row.
        """

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return 0

        rows, cols = coordinates.T
        inside = (rows >= 0) & (rows < self.height) & (cols >= 0) & (cols < self.width)
        self.grid[rows[inside], cols[inside]] = np.uint8(tetromino.value)
        return int(np.count_nonzero(~inside))

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed."""

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

