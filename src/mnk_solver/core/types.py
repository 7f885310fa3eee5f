"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Mark: the closed three-valued cell type
- Outcome: decided/undecided status of a board
- Score constants for the minimax value function
- SearchStats: counters collected during a search
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple


class InvalidDimensions(ValueError):
    """Raised when rows/cols are < 1 or disagree with the board length."""


class Mark(IntEnum):
    """Cell value. Integer values match the int8 board encoding."""

    EMPTY = 0
    A = 1  # first player, maximizing side
    B = 2  # second player, minimizing side

    @property
    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.B if self is Mark.A else Mark.A

    @property
    def symbol(self) -> str:
        return CELL_STRINGS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """Parse 'X' / 'O' (case-insensitive) into a player mark."""
        key = symbol.strip().upper()
        for mark, text in CELL_STRINGS.items():
            if mark is not cls.EMPTY and text == key:
                return mark
        raise ValueError(f"Unknown mark symbol: {symbol!r}")


# Each cell value maps to its display string
CELL_STRINGS = {Mark.EMPTY: " ", Mark.A: "X", Mark.B: "O"}


def is_occupied(cell: int) -> bool:
    """Explicit occupancy predicate (never rely on truthiness of a cell)."""
    return cell != Mark.EMPTY


def side_for_move_count(move_count: int) -> Mark:
    """Side to move derived from a move counter (even -> first player)."""
    return Mark.A if move_count % 2 == 0 else Mark.B


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class Outcome(NamedTuple):
    """Board status. ``winner`` is only meaningful for WIN."""

    kind: OutcomeKind
    winner: Mark = Mark.EMPTY

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        mark = Mark(mark)
        if mark is Mark.EMPTY:
            raise ValueError("A win needs a player mark")
        return cls(OutcomeKind.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_over(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS

    def describe(self, side_to_move: Mark) -> str:
        """Status line for a board with this outcome."""
        if self.kind is OutcomeKind.WIN:
            return f"Winner: {self.winner.symbol}"
        if self.kind is OutcomeKind.DRAW:
            return "Game ended in a draw"
        return f"Next player: {side_to_move.symbol}"


# ─── Value function ───────────────────────────────────────────────────────────
#
# Scores are from the first player's point of view. No depth bias: a win
# found deep in the tree is worth the same as an immediate one.

SCORE_WIN = 10     # WIN(Mark.A)
SCORE_DRAW = 0
SCORE_LOSS = -10   # WIN(Mark.B)

OUTCOME_SCORES = {
    Mark.A: SCORE_WIN,
    Mark.B: SCORE_LOSS,
}


def best_possible_score(side: Mark) -> int:
    """The extremal score ``side`` is trying to reach."""
    return SCORE_WIN if side is Mark.A else SCORE_LOSS


class SearchStats:
    """Counters collected during a single search."""

    __slots__ = ("nodes", "cache_hits", "cutoffs", "elapsed")

    def __init__(self):
        self.nodes = 0
        self.cache_hits = 0
        self.cutoffs = 0
        self.elapsed = 0.0

    @property
    def hit_rate(self) -> float:
        lookups = self.nodes + self.cache_hits
        if lookups == 0:
            return 0.0
        return self.cache_hits / lookups

    def __repr__(self) -> str:
        return (
            f"SearchStats(nodes={self.nodes}, cache_hits={self.cache_hits}, "
            f"cutoffs={self.cutoffs}, elapsed={self.elapsed:.4f}s)"
        )
