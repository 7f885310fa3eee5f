"""
Configuration and strategy registry.
"""

from typing import Optional

from mnk_solver.core.types import InvalidDimensions, Mark
from mnk_solver.games.board import win_length
from mnk_solver.selection import STRATEGIES


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_STRATEGY = "minimax"

# Pause before an engine move is applied, in seconds (presentation only)
DEFAULT_MOVE_DELAY = 0.3


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        strategy: str = DEFAULT_STRATEGY,
        human_mark: Optional[Mark] = Mark.A,
        move_delay: float = DEFAULT_MOVE_DELAY,
    ):
        if rows < 1 or cols < 1:
            raise InvalidDimensions(f"Board must be at least 1x1, got {rows}x{cols}")
        if strategy not in STRATEGIES:
            available = ", ".join(STRATEGIES)
            raise ValueError(f"Unknown strategy: {strategy}. Available: {available}")
        if move_delay < 0:
            raise ValueError(f"move_delay must be >= 0, got {move_delay}")
        if human_mark is not None and Mark(human_mark) is Mark.EMPTY:
            raise ValueError("human_mark must be Mark.A, Mark.B or None")

        self.rows = rows
        self.cols = cols
        self.strategy = strategy
        self.human_mark = Mark(human_mark) if human_mark is not None else None
        self.move_delay = move_delay

    # Derived, never stored
    @property
    def win_length(self) -> int:
        return win_length(self.rows, self.cols)

    @property
    def cells(self) -> int:
        return self.rows * self.cols

    def __repr__(self) -> str:
        return (
            f"Config(rows={self.rows}, cols={self.cols}, strategy={self.strategy!r}, "
            f"human_mark={self.human_mark!r}, move_delay={self.move_delay})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
