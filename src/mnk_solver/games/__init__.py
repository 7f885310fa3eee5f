"""
Games module - board helpers and win detection.
"""

from mnk_solver.games.board import (
    apply_move,
    board_full,
    empty_cells,
    new_board,
    state_string,
    to_coords,
    to_index,
    win_length,
)
from mnk_solver.games.detector import detect, winner

__all__ = [
    "detect",
    "winner",
    "apply_move",
    "board_full",
    "empty_cells",
    "new_board",
    "state_string",
    "to_coords",
    "to_index",
    "win_length",
]
