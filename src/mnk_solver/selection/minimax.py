"""
Exhaustive minimax search with a transposition table.

Value convention (first player's point of view):
    WIN(Mark.A) -> +10, WIN(Mark.B) -> -10, DRAW -> 0
Mark.A maximizes, Mark.B minimizes. Depth does not bias scores.

Every branch receives its own board copy, so nothing has to be undone and
the caller's board is never touched.

Two bounds keep the search tractable beyond 3x3 without changing its
answer:
- Node values are memoized under a symmetry-normalized key. Values are
  exact, so a cached value is the value a fresh search would compute.
- A node stops enumerating children once the mover has reached its best
  possible score. Later children can only tie, and ties keep the earlier
  cell.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Sequence

import numpy as np

from mnk_solver.core.hashing import board_key
from mnk_solver.core.types import (
    Mark,
    OUTCOME_SCORES,
    OutcomeKind,
    SCORE_DRAW,
    SearchStats,
    best_possible_score,
)
from mnk_solver.games.board import empty_cells, place, to_array
from mnk_solver.games.detector import evaluate

logger = logging.getLogger(__name__)


class TranspositionTable:
    """Exact minimax values keyed by ``board_key``."""

    __slots__ = ("_values",)

    def __init__(self):
        self._values: Dict[bytes, int] = {}

    def get(self, key: bytes) -> Optional[int]:
        return self._values.get(key)

    def store(self, key: bytes, value: int) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)


def _validate_side(side: int) -> Mark:
    side = Mark(side)
    if side is Mark.EMPTY:
        raise ValueError("Side to move must be Mark.A or Mark.B")
    return side


def _better(value: int, best: int, side: Mark) -> bool:
    return value > best if side is Mark.A else value < best


def _search(
    board: np.ndarray,
    rows: int,
    cols: int,
    side: Mark,
    table: TranspositionTable,
    stats: SearchStats,
) -> int:
    key = board_key(board, rows, cols, side)
    cached = table.get(key)
    if cached is not None:
        stats.cache_hits += 1
        return cached
    stats.nodes += 1

    outcome = evaluate(board, rows, cols)
    if outcome.kind is OutcomeKind.WIN:
        value = OUTCOME_SCORES[outcome.winner]
    elif outcome.kind is OutcomeKind.DRAW:
        value = SCORE_DRAW
    else:
        target = best_possible_score(side)
        value = None
        for cell in empty_cells(board):
            child = _search(place(board, cell, side), rows, cols, side.opponent, table, stats)
            if value is None or _better(child, value, side):
                value = child
            if value == target:
                stats.cutoffs += 1
                break

    table.store(key, value)
    return value


def minimax_value(
    board: Sequence[int],
    rows: int,
    cols: int,
    side: Mark,
    *,
    table: Optional[TranspositionTable] = None,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Game value of ``board`` with ``side`` to move, under optimal play.

    Raises:
        InvalidDimensions: rows/cols < 1 or board length != rows * cols
        ValueError: side is EMPTY or a cell is not a Mark value
    """
    side = _validate_side(side)
    arr = to_array(board, rows, cols)
    table = table if table is not None else TranspositionTable()
    stats = stats if stats is not None else SearchStats()
    return _search(arr, rows, cols, side, table, stats)


def best_move(
    board: Sequence[int],
    rows: int,
    cols: int,
    side: Mark,
    *,
    table: Optional[TranspositionTable] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[int]:
    """
    Optimal cell for ``side`` to play.

    Candidates are tried in ascending index order; the first cell reaching
    the extremal value is returned, so ties go to the lowest index.

    Args:
        board: Row-major cells (index = row * cols + col). Not modified.
        rows, cols: Board dimensions
        side: Mark to play
        table: Optional table to share between calls (e.g. during self-play).
               A fresh table is used per call otherwise.
        stats: Optional SearchStats to fill in

    Returns:
        Index of an empty cell, or None if the board is full or decided.

    Raises:
        InvalidDimensions: rows/cols < 1 or board length != rows * cols
        ValueError: side is EMPTY or a cell is not a Mark value
    """
    side = _validate_side(side)
    arr = to_array(board, rows, cols)
    table = table if table is not None else TranspositionTable()
    stats = stats if stats is not None else SearchStats()

    if evaluate(arr, rows, cols).is_over:
        return None

    start = time.perf_counter()
    target = best_possible_score(side)
    best_cell: Optional[int] = None
    best_value = 0

    for cell in empty_cells(arr):
        value = _search(place(arr, cell, side), rows, cols, side.opponent, table, stats)
        if best_cell is None or _better(value, best_value, side):
            best_cell, best_value = cell, value
        if best_value == target:
            stats.cutoffs += 1
            break

    stats.elapsed = time.perf_counter() - start
    logger.debug(
        "best_move %sx%s for %s -> %s (value %s, %r, table=%d)",
        rows, cols, side.symbol, best_cell, best_value, stats, len(table),
    )
    return best_cell
