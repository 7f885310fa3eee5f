"""
Factory functions for creating strategies and starting boards.
"""

from typing import List

from mnk_solver.core.types import Mark
from mnk_solver.games.board import new_board
from mnk_solver.selection import STRATEGIES, Strategy
from mnk_solver.utils.config import Config


def create_strategy(name: str) -> Strategy:
    """
    Look up a move-selection strategy.

    Args:
        name: Key from STRATEGIES registry (e.g., "minimax")

    Returns:
        Callable (board, rows, cols, side) -> Optional[int]
    """
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return STRATEGIES[name]


def create_board(config: Config) -> List[Mark]:
    """Empty board sized by ``config``."""
    return new_board(config.rows, config.cols)
