"""
mnk_solver - move-decision engine for K-in-a-row grid games.

Tic-tac-toe generalized to R rows by C columns, with K = min(R, C) marks
in a row (horizontal, vertical or diagonal) needed to win.

Quick Start:
    from mnk_solver import Mark, detect, best_move

    board = [Mark.EMPTY] * 9
    board[0] = board[3] = Mark.A
    board[4] = Mark.B
    detect(board, 3, 3)             # Outcome(IN_PROGRESS)
    best_move(board, 3, 3, Mark.B)  # 6 - block the column

Modules:
    core       - Mark / Outcome types, score constants, board keys
    games      - Board helpers and win detection
    selection  - Minimax search and the fixed-priority heuristic
    api        - Public entry points and the terminal play loop
"""

from mnk_solver.api import (
    play_game,
    parse_move,
)
from mnk_solver.core import InvalidDimensions, Mark, Outcome, OutcomeKind, SearchStats
from mnk_solver.games import detect, winner
from mnk_solver.selection import (
    STRATEGIES,
    TranspositionTable,
    best_move,
    heuristic_move,
    minimax_value,
    select_move,
)
from mnk_solver.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Engine
    "detect",
    "winner",
    "best_move",
    "minimax_value",
    "heuristic_move",
    "select_move",
    "STRATEGIES",
    "TranspositionTable",
    # Play
    "Config",
    "play_game",
    "parse_move",
    # Types
    "Mark",
    "Outcome",
    "OutcomeKind",
    "SearchStats",
    "InvalidDimensions",
]
