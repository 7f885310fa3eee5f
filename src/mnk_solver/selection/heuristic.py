"""
Fixed-priority move policy.

Much cheaper than minimax but not optimal:
1. Complete a run of our own if one cell does it.
2. Otherwise block the opponent's one-cell win.
3. Otherwise take the first empty cell by position: center, corners, rest.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from mnk_solver.core.types import Mark, is_occupied
from mnk_solver.games.board import to_array
from mnk_solver.games.detector import evaluate, winning_cells

logger = logging.getLogger(__name__)


def _middle(n: int) -> Tuple[int, ...]:
    return (n // 2,) if n % 2 else (n // 2 - 1, n // 2)


@lru_cache(maxsize=None)
def priority_order(rows: int, cols: int) -> Tuple[int, ...]:
    """
    Cell preference for step 3.

    Center cell(s), then corners, then everything else, each group
    ascending. On 3x3 this is (4, 0, 2, 6, 8, 1, 3, 5, 7).
    """
    centers = sorted(r * cols + c for r in _middle(rows) for c in _middle(cols))
    corners = sorted(
        {0, cols - 1, (rows - 1) * cols, rows * cols - 1} - set(centers)
    )
    seen = set(centers) | set(corners)
    rest = [i for i in range(rows * cols) if i not in seen]
    return tuple(centers + corners + rest)


def heuristic_move(
    board: Sequence[int], rows: int, cols: int, side: Mark
) -> Optional[int]:
    """
    Pick a move for ``side`` by the fixed-priority rules.

    Returns:
        Index of an empty cell, or None if the board is full or decided.

    Raises:
        InvalidDimensions: rows/cols < 1 or board length != rows * cols
        ValueError: side is EMPTY or a cell is not a Mark value
    """
    side = Mark(side)
    if side is Mark.EMPTY:
        raise ValueError("Side to move must be Mark.A or Mark.B")

    arr = to_array(board, rows, cols)
    if evaluate(arr, rows, cols).is_over:
        return None

    wins = winning_cells(arr, rows, cols, side)
    if wins:
        logger.debug("heuristic: %s completes a run at %d", side.symbol, wins[0])
        return wins[0]

    threats = winning_cells(arr, rows, cols, side.opponent)
    if threats:
        logger.debug("heuristic: %s blocks at %d", side.symbol, threats[0])
        return threats[0]

    for cell in priority_order(rows, cols):
        if not is_occupied(arr[cell]):
            return cell
    return None
