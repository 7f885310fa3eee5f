"""
Tests for mnk_solver.core.hashing

Tests symmetry-normalized transposition keys.
"""

import numpy as np
import pytest

from mnk_solver.core.hashing import board_key, canonical_board, symmetry_maps


def _arr(values, dtype=np.int8):
    return np.array(values, dtype=dtype)


class TestSymmetryMaps:
    """symmetry_maps function tests."""

    def test_square_has_eight(self):
        assert symmetry_maps(3, 3).shape == (8, 9)

    def test_rectangle_has_four(self):
        assert symmetry_maps(2, 3).shape == (4, 6)

    def test_rows_are_permutations(self):
        for rows, cols in [(3, 3), (2, 4), (4, 4), (1, 5)]:
            for perm in symmetry_maps(rows, cols):
                assert sorted(perm.tolist()) == list(range(rows * cols))

    def test_first_is_identity(self):
        assert symmetry_maps(3, 3)[0].tolist() == list(range(9))

    def test_read_only(self):
        with pytest.raises(ValueError):
            symmetry_maps(3, 3)[0, 0] = 5


class TestCanonicalBoard:
    """Symmetric boards share one canonical form."""

    def test_corners_equivalent(self):
        """A single mark in any corner is the same position."""
        keys = set()
        for corner in (0, 2, 6, 8):
            board = np.zeros(9, dtype=np.int8)
            board[corner] = 1
            keys.add(canonical_board(board, 3, 3))
        assert len(keys) == 1

    def test_edges_equivalent(self):
        keys = set()
        for edge in (1, 3, 5, 7):
            board = np.zeros(9, dtype=np.int8)
            board[edge] = 1
            keys.add(canonical_board(board, 3, 3))
        assert len(keys) == 1

    def test_corner_and_edge_differ(self):
        corner = _arr([1, 0, 0, 0, 0, 0, 0, 0, 0])
        edge = _arr([0, 1, 0, 0, 0, 0, 0, 0, 0])
        assert canonical_board(corner, 3, 3) != canonical_board(edge, 3, 3)

    def test_transpose_only_for_squares(self):
        """On a 2x3 board a transpose is not a symmetry."""
        top_middle = _arr([0, 1, 0, 0, 0, 0])
        bottom_left = _arr([0, 0, 0, 1, 0, 0])
        assert canonical_board(top_middle, 2, 3) != canonical_board(bottom_left, 2, 3)

    def test_rectangle_flip(self):
        """Left/right mirror images match on rectangles."""
        left = _arr([1, 0, 0, 2, 0, 0])
        right = _arr([0, 0, 1, 0, 0, 2])
        assert canonical_board(left, 2, 3) == canonical_board(right, 2, 3)

    def test_input_unchanged(self):
        board = _arr([1, 2, 0, 0, 1, 0, 0, 0, 2])
        before = board.copy()
        canonical_board(board, 3, 3)
        np.testing.assert_array_equal(board, before)


class TestBoardKey:
    """board_key function tests."""

    def test_side_matters(self):
        board = np.zeros(9, dtype=np.int8)
        assert board_key(board, 3, 3, 1) != board_key(board, 3, 3, 2)

    def test_deterministic(self):
        board = _arr([1, 0, 2, 0, 1, 0, 2, 0, 0])
        assert board_key(board, 3, 3, 1) == board_key(board.copy(), 3, 3, 1)

    def test_is_bytes(self):
        key = board_key(np.zeros(4, dtype=np.int8), 2, 2, 1)
        assert isinstance(key, bytes)
        assert len(key) == 5
