"""
Selection module - move selection strategies.

Provides:
- best_move(): exhaustive minimax (authoritative policy)
- heuristic_move(): fixed-priority win / block / position policy
- select_move(): dispatch by strategy name
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from mnk_solver.core.types import Mark
from mnk_solver.selection.heuristic import heuristic_move, priority_order
from mnk_solver.selection.minimax import TranspositionTable, best_move, minimax_value

Strategy = Callable[[Sequence[int], int, int, Mark], Optional[int]]

STRATEGIES: Dict[str, Strategy] = {
    "minimax": best_move,
    "heuristic": heuristic_move,
}


def select_move(
    board: Sequence[int],
    rows: int,
    cols: int,
    side: Mark,
    strategy: str = "minimax",
) -> Optional[int]:
    """
    Select a move for ``side`` using the named strategy.

    Raises:
        ValueError: unknown strategy name
    """
    if strategy not in STRATEGIES:
        available = ", ".join(STRATEGIES)
        raise ValueError(f"Unknown strategy: {strategy}. Available: {available}")
    return STRATEGIES[strategy](board, rows, cols, side)


__all__ = [
    "STRATEGIES",
    "Strategy",
    "TranspositionTable",
    "best_move",
    "heuristic_move",
    "minimax_value",
    "priority_order",
    "select_move",
]
