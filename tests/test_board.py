"""Tests for the Board grid storage."""

import pytest

from grid4.core.board import Board
from grid4.core.errors import InvalidSizeError, OutOfBoundsError, InvalidCellValueError
from grid4.core.types import Cell, Player


class TestBoardCreation:

    @pytest.mark.parametrize("size", [3, 5, 7])
    def test_valid_sizes_start_empty(self, size):
        board = Board(size)
        assert board.values.shape == (size, size)
        assert board.values.sum() == 0
        assert board.claimed_count() == 0
        assert board.get(size - 1, size - 1) == Cell(0, None)

    @pytest.mark.parametrize("size", [0, 1, 2, 4, 6, 8, 9, -3])
    def test_invalid_sizes_rejected(self, size):
        with pytest.raises(InvalidSizeError) as exc:
            Board(size)
        assert exc.value.size == size

    def test_invalid_size_is_a_value_error(self):
        with pytest.raises(ValueError):
            Board(4)


class TestBoardAccess:

    def test_set_then_get(self):
        board = Board(3)
        board.set(1, 2, 4, Player.PLAYER_TWO)
        cell = board.get(1, 2)
        assert cell.value == 4
        assert cell.owner is Player.PLAYER_TWO
        assert cell.claimed

    def test_set_clears_owner(self):
        board = Board(3)
        board.set(0, 0, 4, Player.PLAYER_ONE)
        board.set(0, 0, 3, None)
        assert board.get(0, 0) == Cell(3, None)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_bounds(self, row, col):
        board = Board(3)
        with pytest.raises(OutOfBoundsError, match="out of bounds for 3x3 grid"):
            board.get(row, col)
        with pytest.raises(OutOfBoundsError):
            board.set(row, col, 1, None)

    @pytest.mark.parametrize("value", [-1, 5])
    def test_set_rejects_bad_values(self, value):
        board = Board(3)
        with pytest.raises(InvalidCellValueError):
            board.set(0, 0, value, None)


class TestBoardNeighbors:

    @pytest.mark.parametrize("size", [3, 5, 7])
    def test_neighbor_counts_by_position(self, size):
        board = Board(size)
        mid = size // 2
        last = size - 1
        for corner in [(0, 0), (0, last), (last, 0), (last, last)]:
            assert len(board.neighbors(*corner)) == 3
        for edge in [(0, mid), (mid, 0), (last, mid), (mid, last)]:
            assert len(board.neighbors(*edge)) == 4
        assert len(board.neighbors(mid, mid)) == 5

    def test_clicked_cell_first(self):
        assert Board(5).neighbors(2, 3)[0] == (2, 3)

    def test_neighbors_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            Board(3).neighbors(3, 1)


class TestBoardHelpers:

    def test_is_full(self):
        board = Board(3)
        board.values[:] = 4
        assert board.is_full()
        board.values[2, 2] = 3
        assert not board.is_full()

    def test_clear_and_clone(self):
        board = Board(3)
        board.set(1, 1, 4, Player.PLAYER_ONE)
        copy = board.clone()
        board.clear()
        assert board.get(1, 1) == Cell(0, None)
        assert copy.get(1, 1) == Cell(4, Player.PLAYER_ONE)
