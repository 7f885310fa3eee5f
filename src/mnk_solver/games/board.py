"""
NumPy utilities for R x C boards.

Boards cross the public API as any row-major sequence of cell values
(list, tuple, numpy array). Internally the engine works on owned int8
copies so a caller's board is never mutated.
"""

from __future__ import annotations

import numbers
from typing import List, Optional, Sequence

import numpy as np

from mnk_solver.core.types import CELL_STRINGS, InvalidDimensions, Mark, is_occupied

_VALID_CELLS = np.array([int(m) for m in Mark], dtype=np.int8)


def win_length(rows: int, cols: int) -> int:
    """Run length needed to win. Always derived, never stored."""
    return min(rows, cols)


def dimensions_valid(board: Sequence[int], rows: int, cols: int) -> bool:
    """True if rows/cols are integers >= 1 and agree with the board length."""
    if not (isinstance(rows, numbers.Integral) and isinstance(cols, numbers.Integral)):
        return False
    if rows < 1 or cols < 1:
        return False
    try:
        return len(board) == rows * cols
    except TypeError:
        return False


def check_dimensions(board: Sequence[int], rows: int, cols: int) -> None:
    """Raise InvalidDimensions unless ``dimensions_valid``."""
    if not (isinstance(rows, numbers.Integral) and isinstance(cols, numbers.Integral)):
        raise InvalidDimensions(f"Board dimensions must be integers, got {rows!r}x{cols!r}")
    if rows < 1 or cols < 1:
        raise InvalidDimensions(f"Board must be at least 1x1, got {rows}x{cols}")
    if not dimensions_valid(board, rows, cols):
        raise InvalidDimensions(
            f"Board of length {len(board)} does not fit {rows}x{cols}"
        )


def as_array(board: Sequence[int]) -> Optional[np.ndarray]:
    """
    Owned int8 copy of ``board``.

    Returns None if any cell is not a Mark value, so callers can
    fail closed instead of raising.
    """
    try:
        arr = np.array([int(v) for v in board], dtype=np.int8)
    except (TypeError, ValueError, OverflowError):
        return None
    if not np.isin(arr, _VALID_CELLS).all():
        return None
    return arr


def to_array(board: Sequence[int], rows: int, cols: int) -> np.ndarray:
    """Validated owned copy. Raises InvalidDimensions / ValueError."""
    check_dimensions(board, rows, cols)
    arr = as_array(board)
    if arr is None:
        raise ValueError("Board cells must be Mark values (0, 1 or 2)")
    return arr


def new_board(rows: int, cols: int) -> List[Mark]:
    """Empty row-major board."""
    if rows < 1 or cols < 1:
        raise InvalidDimensions(f"Board must be at least 1x1, got {rows}x{cols}")
    return [Mark.EMPTY] * (rows * cols)


def empty_cells(board: np.ndarray) -> List[int]:
    """Indices of empty cells, ascending."""
    return [int(i) for i in np.flatnonzero(board == Mark.EMPTY)]


def board_full(board: np.ndarray) -> bool:
    return not np.any(board == Mark.EMPTY)


def place(board: np.ndarray, index: int, mark: Mark) -> np.ndarray:
    """Copy-on-branch trial placement: returns a new board."""
    child = board.copy()
    child[index] = mark
    return child


def apply_move(board: Sequence[int], index: int, mark: Mark) -> List[Mark]:
    """
    Return a new list board with ``mark`` at ``index``.

    Used by collaborators that own the authoritative board.
    """
    if not 0 <= index < len(board):
        raise ValueError(f"Cell {index} is off the board")
    if is_occupied(board[index]):
        raise ValueError(f"Cell {index} is occupied")
    next_board = [Mark(v) for v in board]
    next_board[index] = Mark(mark)
    return next_board


def to_index(row: int, col: int, cols: int) -> int:
    return row * cols + col


def to_coords(index: int, cols: int) -> tuple[int, int]:
    return divmod(index, cols)


def state_string(board: Sequence[int], rows: int, cols: int) -> str:
    """Pretty string representation of the board."""
    cells = [CELL_STRINGS[Mark(v)] for v in board]
    top = "╭" + "┬".join(["───"] * cols) + "╮"
    sep = "├" + "┼".join(["───"] * cols) + "┤"
    bottom = "╰" + "┴".join(["───"] * cols) + "╯"

    lines = [top]
    for r in range(rows):
        row = cells[r * cols:(r + 1) * cols]
        lines.append("│ " + " │ ".join(row) + " │")
        if r < rows - 1:
            lines.append(sep)
    lines.append(bottom)
    return "\n".join(lines)
