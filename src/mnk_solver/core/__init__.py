"""
Core module - fundamental types and board keys.
"""

from mnk_solver.core.types import (
    CELL_STRINGS,
    InvalidDimensions,
    Mark,
    Outcome,
    OutcomeKind,
    SCORE_DRAW,
    SCORE_LOSS,
    SCORE_WIN,
    SearchStats,
    is_occupied,
    side_for_move_count,
)
from mnk_solver.core.hashing import board_key, canonical_board, symmetry_maps

__all__ = [
    # Types
    "Mark",
    "Outcome",
    "OutcomeKind",
    "SearchStats",
    "InvalidDimensions",
    # Constants
    "CELL_STRINGS",
    "SCORE_WIN",
    "SCORE_DRAW",
    "SCORE_LOSS",
    # Functions
    "is_occupied",
    "side_for_move_count",
    "board_key",
    "canonical_board",
    "symmetry_maps",
]
