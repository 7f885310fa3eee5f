"""
Win detection for R x C boards with K = min(R, C) in a row.

``detect`` is safe to call on anything: malformed input is reported as
IN_PROGRESS rather than raised, so a UI that is mid-resize can poll it.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from mnk_solver.core.types import Mark, Outcome, is_occupied
from mnk_solver.games.board import as_array, board_full, dimensions_valid, win_length

logger = logging.getLogger(__name__)

# (d_row, d_col) in scan order: right, down, down-right, up-right
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


def _run_from(
    cells: list, rows: int, cols: int, r: int, c: int, dr: int, dc: int, k: int
) -> bool:
    """True if K identical marks start at (r, c) and extend along (dr, dc)."""
    mark = cells[r * cols + c]
    for step in range(1, k):
        rr, cc = r + dr * step, c + dc * step
        if not (0 <= rr < rows and 0 <= cc < cols):
            return False
        if cells[rr * cols + cc] != mark:
            return False
    return True


def find_winner(board: np.ndarray, rows: int, cols: int) -> Mark:
    """
    First winning mark by scan order, or EMPTY.

    Expects a validated int8 board; see ``detect`` for the guarded entry point.
    """
    k = win_length(rows, cols)
    cells = board.tolist()
    for r in range(rows):
        for c in range(cols):
            mark = cells[r * cols + c]
            if not is_occupied(mark):
                continue
            for dr, dc in DIRECTIONS:
                if _run_from(cells, rows, cols, r, c, dr, dc, k):
                    return Mark(mark)
    return Mark.EMPTY


def evaluate(board: np.ndarray, rows: int, cols: int) -> Outcome:
    """Outcome of a validated int8 board."""
    winner = find_winner(board, rows, cols)
    if winner is not Mark.EMPTY:
        return Outcome.win(winner)
    if board_full(board):
        return Outcome.draw()
    return Outcome.in_progress()


def _validated(board: Sequence[int], rows: int, cols: int) -> Optional[np.ndarray]:
    if not dimensions_valid(board, rows, cols):
        logger.debug("detect: board does not fit %sx%s, reporting in progress", rows, cols)
        return None
    arr = as_array(board)
    if arr is None:
        logger.debug("detect: board holds non-mark values, reporting in progress")
    return arr


def detect(board: Sequence[int], rows: int, cols: int) -> Outcome:
    """
    Decide whether the game on ``board`` has ended.

    Args:
        board: Row-major cells (index = row * cols + col)
        rows, cols: Board dimensions, both >= 1

    Returns:
        Outcome.win(mark), Outcome.draw(), or Outcome.in_progress().
        Malformed input fails closed to Outcome.in_progress().
    """
    arr = _validated(board, rows, cols)
    if arr is None:
        return Outcome.in_progress()
    return evaluate(arr, rows, cols)


def winner(board: Sequence[int], rows: int, cols: int) -> Mark:
    """Winning mark, or EMPTY when there is none (or input is malformed)."""
    arr = _validated(board, rows, cols)
    if arr is None:
        return Mark.EMPTY
    return find_winner(arr, rows, cols)


def winning_cells(board: np.ndarray, rows: int, cols: int, side: Mark) -> list[int]:
    """Empty cells where ``side`` would complete a run, ascending."""
    cells = []
    for i in np.flatnonzero(board == Mark.EMPTY):
        board[i] = side
        try:
            if find_winner(board, rows, cols) is side:
                cells.append(int(i))
        finally:
            board[i] = Mark.EMPTY
    return cells
