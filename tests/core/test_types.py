"""
Tests for mnk_solver.core.types

Tests Mark / Outcome types and the value constants.
"""

import pytest

from mnk_solver.core.types import (
    CELL_STRINGS,
    InvalidDimensions,
    Mark,
    Outcome,
    OutcomeKind,
    OUTCOME_SCORES,
    SCORE_DRAW,
    SCORE_LOSS,
    SCORE_WIN,
    SearchStats,
    best_possible_score,
    is_occupied,
    side_for_move_count,
)


class TestMark:
    """Mark enumeration tests."""

    def test_int_encoding(self):
        """Marks use the int8 board encoding."""
        assert [int(m) for m in Mark] == [0, 1, 2]

    def test_opponent(self):
        assert Mark.A.opponent is Mark.B
        assert Mark.B.opponent is Mark.A

    def test_empty_has_no_opponent(self):
        with pytest.raises(ValueError):
            Mark.EMPTY.opponent

    @pytest.mark.parametrize("text, mark", [
        ("X", Mark.A), ("x", Mark.A), (" O ", Mark.B), ("o", Mark.B),
    ])
    def test_from_symbol(self, text, mark):
        assert Mark.from_symbol(text) is mark

    @pytest.mark.parametrize("text", ["", " ", "Z", "XO"])
    def test_from_symbol_rejects(self, text):
        with pytest.raises(ValueError):
            Mark.from_symbol(text)

    def test_symbols(self):
        assert Mark.A.symbol == "X"
        assert Mark.B.symbol == "O"
        assert set(CELL_STRINGS) == set(Mark)


class TestOccupancy:
    """is_occupied is an explicit predicate."""

    def test_empty_not_occupied(self):
        assert is_occupied(Mark.EMPTY) is False
        assert is_occupied(0) is False

    def test_marks_occupied(self):
        assert is_occupied(Mark.A) is True
        assert is_occupied(Mark.B) is True


class TestSideForMoveCount:

    @pytest.mark.parametrize("count, side", [
        (0, Mark.A), (1, Mark.B), (2, Mark.A), (7, Mark.B),
    ])
    def test_even_is_first_player(self, count, side):
        assert side_for_move_count(count) is side


class TestOutcome:
    """Outcome variant tests."""

    def test_in_progress(self):
        o = Outcome.in_progress()
        assert o.kind is OutcomeKind.IN_PROGRESS
        assert o.winner is Mark.EMPTY
        assert o.is_over is False

    def test_win(self):
        o = Outcome.win(Mark.B)
        assert o.kind is OutcomeKind.WIN
        assert o.winner is Mark.B
        assert o.is_over is True

    def test_win_from_int(self):
        assert Outcome.win(1).winner is Mark.A

    def test_win_needs_mark(self):
        with pytest.raises(ValueError):
            Outcome.win(Mark.EMPTY)

    def test_draw(self):
        o = Outcome.draw()
        assert o.kind is OutcomeKind.DRAW
        assert o.is_over is True

    def test_equality(self):
        """Outcomes compare by value."""
        assert Outcome.win(Mark.A) == Outcome.win(Mark.A)
        assert Outcome.win(Mark.A) != Outcome.win(Mark.B)
        assert Outcome.draw() != Outcome.in_progress()

    @pytest.mark.parametrize("outcome, side, text", [
        (Outcome.win(Mark.A), Mark.B, "Winner: X"),
        (Outcome.draw(), Mark.A, "Game ended in a draw"),
        (Outcome.in_progress(), Mark.B, "Next player: O"),
    ])
    def test_describe(self, outcome, side, text):
        assert outcome.describe(side) == text


class TestScores:

    def test_values(self):
        assert (SCORE_WIN, SCORE_DRAW, SCORE_LOSS) == (10, 0, -10)

    def test_outcome_scores(self):
        """First player wins score positive."""
        assert OUTCOME_SCORES[Mark.A] == SCORE_WIN
        assert OUTCOME_SCORES[Mark.B] == SCORE_LOSS

    def test_best_possible_score(self):
        assert best_possible_score(Mark.A) == SCORE_WIN
        assert best_possible_score(Mark.B) == SCORE_LOSS


class TestSearchStats:

    def test_starts_at_zero(self):
        s = SearchStats()
        assert (s.nodes, s.cache_hits, s.cutoffs) == (0, 0, 0)
        assert s.hit_rate == 0.0

    def test_hit_rate(self):
        s = SearchStats()
        s.nodes, s.cache_hits = 3, 1
        assert s.hit_rate == pytest.approx(0.25)

    def test_repr(self):
        assert "nodes=0" in repr(SearchStats())


def test_invalid_dimensions_is_value_error():
    assert issubclass(InvalidDimensions, ValueError)
