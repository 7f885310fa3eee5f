"""
Board keys for the transposition table - optimized for int8 arrays.

Keys are normalized over the board's symmetry group so that rotated or
reflected positions share one entry. Win lines map onto win lines under
every transform used here, so game values are identical across a class.
"""

from functools import lru_cache

import numpy as np


@lru_cache(maxsize=None)
def symmetry_maps(rows: int, cols: int) -> np.ndarray:
    """
    Index permutations for the board's symmetry group.

    Square boards get all 8 (D4) transforms; rectangular boards only the
    4 that keep the shape (identity, both flips, half turn).

    Returns:
        Array of shape (n_transforms, rows * cols); ``board[maps[k]]`` is
        the k-th transformed board.
    """
    grid = np.arange(rows * cols).reshape(rows, cols)
    transforms = [
        grid,
        np.fliplr(grid),
        np.flipud(grid),
        np.rot90(grid, 2),
    ]
    if rows == cols:
        transforms += [
            grid.T,
            np.rot90(grid, 1),
            np.rot90(grid, 3),
            np.rot90(grid, 2).T,
        ]
    maps = np.stack([t.ravel() for t in transforms])
    maps.flags.writeable = False
    return maps


def canonical_board(board: np.ndarray, rows: int, cols: int) -> bytes:
    """Smallest byte string over all symmetric variants of ``board``."""
    variants = board[symmetry_maps(rows, cols)]
    return min(v.tobytes() for v in variants)


def board_key(board: np.ndarray, rows: int, cols: int, side: int) -> bytes:
    """Transposition key: canonical board plus side to move."""
    return canonical_board(board, rows, cols) + bytes((int(side),))
