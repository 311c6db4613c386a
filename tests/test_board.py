"""Unit tests for win evaluation."""
import itertools

import pytest

from tictactoe.board import Cell, WINNING_LINES, evaluate, is_draw, is_full, winning_line

E, X, O = Cell.EMPTY, Cell.X, Cell.O


def board_from(text):
    return [{"X": X, "O": O, ".": E}[ch] for ch in text]


def test_empty_board_has_no_winner():
    assert evaluate([E] * 9) is None
    assert winning_line([E] * 9) is None


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("symbol", [X, O])
def test_every_line_wins(line, symbol):
    cells = [E] * 9
    for i in line:
        cells[i] = symbol
    assert evaluate(cells) is symbol
    assert winning_line(cells) == line


def test_first_line_in_scan_order_is_reported():
    cells = board_from("XXX" "X.." "X..")
    assert winning_line(cells) == (0, 1, 2)


def test_mixed_line_does_not_win():
    assert evaluate(board_from("XXO" "..." "...")) is None


def test_winner_appears_at_least_three_times():
    # Every 3x3 board over {empty, X, O}, legal or not
    for combo in itertools.product([E, X, O], repeat=9):
        cells = list(combo)
        winner = evaluate(cells)
        if winner is not None:
            assert cells.count(winner) >= 3


def test_evaluate_does_not_mutate_input():
    cells = board_from("XO." ".X." "..O")
    before = list(cells)
    evaluate(cells)
    assert cells == before


def test_full_board_without_line_is_draw():
    cells = board_from("XOX" "XOO" "OXX")
    assert is_full(cells)
    assert evaluate(cells) is None
    assert is_draw(cells)


def test_full_board_with_line_is_not_draw():
    cells = board_from("XXX" "OOX" "XOO")
    assert is_full(cells)
    assert not is_draw(cells)


def test_cell_symbols():
    assert X.symbol == "X"
    assert E.symbol == ""
    assert Cell(None) is E
