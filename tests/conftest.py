"""
Shared test fixtures for mnk_solver tests.

Boards are written as strings for readability: 'X', 'O' and '.' per cell,
row-major, whitespace ignored.
"""

from typing import Callable, List

import pytest

from mnk_solver.core.types import Mark


_SYMBOLS = {"X": Mark.A, "O": Mark.B, ".": Mark.EMPTY}


def parse_board(text: str) -> List[Mark]:
    """'XO. / ...' style board literal -> list of Marks."""
    return [_SYMBOLS[ch] for ch in text if ch in _SYMBOLS]


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board_from() -> Callable[[str], List[Mark]]:
    """Board literal parser."""
    return parse_board


@pytest.fixture
def empty_3x3() -> List[Mark]:
    return [Mark.EMPTY] * 9


@pytest.fixture
def drawn_3x3() -> List[Mark]:
    """Full board, no line: X O X / X X O / O X O."""
    return parse_board("XOX XXO OXO")


@pytest.fixture
def x_column_threat() -> List[Mark]:
    """X on 0 and 3, O on 4; O must block at 6."""
    return parse_board("X.. XO. ...")
