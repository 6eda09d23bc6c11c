from __future__ import annotations

import numpy as np
import pytest

from emojifall.board import Board
from emojifall.tetromino import PIECE_VALUES, TETROMINO_SHAPES, Tetromino, TetrominoType, rotate_clockwise


I_SHAPE = TETROMINO_SHAPES[TetrominoType.I]
O_SHAPE = TETROMINO_SHAPES[TetrominoType.O]


def test_get_and_set_cell_reject_out_of_bounds() -> None:
    board = Board()
    board.set_cell(19, 9, 3)
    assert board.get_cell(19, 9) == 3
    with pytest.raises(IndexError):
        board.get_cell(20, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)


def test_walls_and_floor_collide() -> None:
    board = Board()
    # Horizontal I occupies matrix row 1, columns 0..3.
    assert not board.collides(I_SHAPE, 0, 0)
    assert board.collides(I_SHAPE, 0, -1)
    assert not board.collides(I_SHAPE, 0, 6)
    assert board.collides(I_SHAPE, 0, 7)
    assert not board.collides(I_SHAPE, 18, 0)
    assert board.collides(I_SHAPE, 19, 0)


def test_rows_above_board_never_collide() -> None:
    board = Board()
    board.grid[0, :] = 1
    # Whole piece above the board: no occupancy check.
    assert not board.collides(I_SHAPE, -5, 3)
    assert board.collides(I_SHAPE, -1, 3)


def test_occupied_cell_collides() -> None:
    board = Board()
    board.set_cell(10, 5, 1)
    # O occupies matrix rows 1-2, columns 1-2.
    assert board.collides(O_SHAPE, 8, 4)
    assert not board.collides(O_SHAPE, 8, 5)


def test_drop_distance_reaches_floor_or_stack() -> None:
    board = Board()
    piece = Tetromino.of(TetrominoType.O, position=(-1, 3))
    assert board.drop_distance(piece) == 18
    board.set_cell(19, 4, 1)
    assert board.drop_distance(piece) == 17


def test_lock_drops_cells_above_the_board() -> None:
    board = Board()
    vertical = rotate_clockwise(I_SHAPE)
    piece = Tetromino(TetrominoType.I, vertical, position=(-2, 0))
    discarded = board.lock_piece(piece)
    assert discarded == 2
    assert board.grid.shape == (20, 10)
    assert np.count_nonzero(board.grid) == 2
    column = [(r, c) for r, c in piece.blocks() if r >= 0]
    for r, c in column:
        assert board.get_cell(r, c) == PIECE_VALUES[TetrominoType.I]


def test_lock_never_writes_outside_board() -> None:
    board = Board()
    for row in range(-4, 19):
        for col in range(-1, 8):
            piece = Tetromino.of(TetrominoType.T, position=(row, col))
            if board.collides(piece.matrix, row, col):
                continue
            probe = Board()
            probe.lock_piece(piece)
            inside = [(r, c) for r, c in piece.blocks() if 0 <= r < 20 and 0 <= c < 10]
            assert probe.grid.shape == (20, 10)
            assert np.count_nonzero(probe.grid) == len(inside)


def test_clear_full_rows_without_full_rows_is_noop() -> None:
    board = Board()
    board.grid[19, :9] = 1
    board.grid[18, 3] = 2
    before = board.grid.copy()
    assert board.clear_full_rows() == 0
    assert np.array_equal(board.grid, before)


def test_clear_full_rows_keeps_order_of_remaining_rows() -> None:
    board = Board()
    board.grid[19, :] = 1
    board.grid[18, 0] = 2
    board.grid[17, :] = 3
    board.grid[16, 1] = 4
    assert board.clear_full_rows() == 2
    assert board.grid.shape == (20, 10)
    assert board.grid[19, 0] == 2
    assert board.grid[18, 1] == 4
    assert not board.grid[:18].any()
