"""Tests for the Mark, Cell and Outcome value types."""

from ttt.encode import Cell, Mark, Outcome


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X


def test_cell_occupied_and_mark_convert_both_ways():
    for mark in Mark:
        cell = Cell.occupied(mark)
        assert cell != Cell.Empty
        assert cell.mark == mark
    assert Cell.Empty.mark is None


def test_cell_symbols():
    assert Cell.Empty.symbol == " "
    assert Cell.X.symbol == "X"
    assert Cell.O.symbol == "O"


def test_outcome_winner():
    assert Outcome.won_by(Mark.X) == Outcome.X_Won
    assert Outcome.won_by(Mark.O).winner == Mark.O
    assert Outcome.Tied.winner is None
    assert Outcome.Running.winner is None


def test_outcome_is_over():
    assert not Outcome.Running.is_over
    assert Outcome.Tied.is_over
    assert Outcome.X_Won.is_over
    assert Outcome.O_Won.is_over


def test_outcome_never_equals_cell_or_mark():
    assert Outcome.Tied != Cell.Empty
    assert Outcome.X_Won != Mark.X
    assert Outcome.O_Won != Cell.O


def test_occupied_cells_equal_their_mark():
    assert Cell.X == Mark.X
    assert Cell.O == Mark.O
