"""
Public API: the two engine operations plus a terminal play loop.

Usage:
    from mnk_solver import detect, best_move, Mark

    board = [Mark.EMPTY] * 9
    detect(board, 3, 3)            # Outcome(kind=IN_PROGRESS, ...)
    best_move(board, 3, 3, Mark.A) # 0 - every opening draws, lowest index wins

The play loop is the enclosing application: it owns the board, the move
history and the pacing delay, and only asks the engine questions.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, List, Optional, Sequence

from mnk_solver.core.types import Mark, Outcome, side_for_move_count
from mnk_solver.games.board import apply_move, state_string, to_index
from mnk_solver.games.detector import detect
from mnk_solver.selection import TranspositionTable, best_move, heuristic_move, select_move
from mnk_solver.utils.config import Config
from mnk_solver.utils.factory import create_board, create_strategy

logger = logging.getLogger(__name__)

UNDO = "undo"
QUIT = "quit"


def parse_move(raw: str, rows: int, cols: int) -> int:
    """
    Parse human input into a cell index.

    Accepts ``row,col`` (zero-based) or a bare cell index.

    Raises:
        ValueError: unparsable or off-board input
    """
    parts = [p.strip() for p in raw.split(",")]
    try:
        values = [int(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Expected 'row,col' or a cell index, got {raw!r}") from e

    if len(values) == 2:
        r, c = values
        if not (0 <= r < rows and 0 <= c < cols):
            raise ValueError(f"({r},{c}) is off the {rows}x{cols} board")
        return to_index(r, c, cols)
    if len(values) == 1:
        (index,) = values
        if not 0 <= index < rows * cols:
            raise ValueError(f"Cell {index} is off the {rows}x{cols} board")
        return index
    raise ValueError(f"Expected 'row,col' or a cell index, got {raw!r}")


def _engine(config: Config):
    """Strategy for engine turns; minimax shares one table for the whole game."""
    strategy = create_strategy(config.strategy)
    if strategy is best_move:
        return functools.partial(best_move, table=TranspositionTable())
    return strategy


def _human_turn(
    board: Sequence[int],
    config: Config,
    side: Mark,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
):
    """Prompt until a legal move, UNDO or QUIT is entered."""
    output_fn(f"\nYour turn ({side.symbol}). Enter row,col or a cell index; 'u' undoes, 'q' quits.")
    while True:
        raw = input_fn("Move: ").strip().lower()
        if raw in ("u", "undo"):
            return UNDO
        if raw in ("q", "quit"):
            return QUIT
        try:
            index = parse_move(raw, config.rows, config.cols)
            return apply_move(board, index, side)
        except ValueError as e:
            output_fn(f"Invalid move: {e}")


def _rewind(history: List[List[Mark]]) -> int:
    """Drop the last full turn from history; returns boards removed."""
    steps = min(2, len(history) - 1)
    del history[len(history) - steps:]
    return steps


def play_game(
    config: Config,
    *,
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
    sleep_fn: Optional[Callable[[float], None]] = None,
) -> Optional[Outcome]:
    """
    Run one game in the terminal.

    The side to move is derived from the history length; status text and
    game end come from ``detect`` on every turn. Engine moves are applied
    after ``config.move_delay`` seconds.

    Args:
        config: Board size, strategy, human side and pacing delay
        input_fn, output_fn, sleep_fn: Default to input / print / time.sleep

    Returns:
        Final Outcome, or None if the human quit.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    sleep_fn = sleep_fn or time.sleep
    engine = _engine(config)
    history: List[List[Mark]] = [create_board(config)]

    logger.info("Starting %r", config)

    while True:
        board = history[-1]
        side = side_for_move_count(len(history) - 1)
        outcome = detect(board, config.rows, config.cols)

        output_fn(state_string(board, config.rows, config.cols))
        output_fn(outcome.describe(side))
        if outcome.is_over:
            return outcome

        if side is config.human_mark:
            result = _human_turn(board, config, side, input_fn, output_fn)
            if result == QUIT:
                return None
            if result == UNDO:
                if _rewind(history) == 0:
                    output_fn("Nothing to undo")
                continue
            history.append(result)
        else:
            move = engine(board, config.rows, config.cols, side)
            if move is None:
                return outcome
            sleep_fn(config.move_delay)
            output_fn(f"\nEngine ({side.symbol}) played: {move}")
            history.append(apply_move(board, move, side))


__all__ = [
    "Config",
    "Outcome",
    "best_move",
    "detect",
    "heuristic_move",
    "parse_move",
    "play_game",
    "select_move",
]
