"""Unit tests for the history manager."""
import pytest

from tictactoe.board import Cell
from tictactoe.errors import InvalidIndex
from tictactoe.history import HistoryManager, MoveEntry, Snapshot


def play_all(history, cells):
    for cell in cells:
        history.play(cell)


def test_new_history_starts_empty():
    history = HistoryManager()
    assert len(history) == 1
    assert history.current_move == 0
    assert history.current_snapshot == Snapshot.empty()
    assert history.next_player is Cell.X


def test_players_alternate():
    history = HistoryManager()
    history.play(4)
    assert history.current_snapshot[4] is Cell.X
    assert history.next_player is Cell.O
    history.play(0)
    assert history.current_snapshot[0] is Cell.O


def test_play_appends_one_snapshot_with_one_change():
    history = HistoryManager()
    play_all(history, [0, 4])
    k = history.current_move
    history.play(8)
    assert len(history) == k + 2
    assert history.current_move == k + 1
    before, after = history.snapshots[k], history.snapshots[k + 1]
    assert after.changed_cells(before) == [8]
    assert before[8] is Cell.EMPTY


def test_old_snapshots_are_not_mutated():
    history = HistoryManager()
    history.play(0)
    first = history.snapshots[1]
    history.play(1)
    assert first[1] is Cell.EMPTY
    with pytest.raises(AttributeError):
        first.cells = ()


def test_occupied_cell_is_ignored():
    history = HistoryManager()
    history.play(0)
    before = (history.snapshots, history.current_move)
    history.play(0)
    history.play(0)
    assert (history.snapshots, history.current_move) == before


@pytest.mark.parametrize("cell", [-1, 9, 100, "3", None, True])
def test_invalid_cell_is_ignored(cell):
    history = HistoryManager()
    history.play(cell)
    assert len(history) == 1
    assert history.current_move == 0


def test_check_move_reasons():
    history = HistoryManager()
    history.play(0)
    assert history.check_move(1).success
    assert "taken" in history.check_move(0).message
    assert "range" in history.check_move(9).message


def test_top_row_win_stops_play():
    history = HistoryManager()
    play_all(history, [0, 4, 1, 5, 2])
    assert len(history) == 6
    history.play(8)
    assert len(history) == 6
    assert history.check_move(8).message == "Game is already over"


def test_jump_only_moves_viewed_index():
    history = HistoryManager()
    play_all(history, [0, 4, 1])
    assert history.current_move == 3
    history.jump_to(1)
    assert history.current_move == 1
    assert len(history) == 4
    assert history.next_player is Cell.O
    assert history.current_snapshot == history.snapshots[1]


def test_play_after_jump_discards_future():
    history = HistoryManager()
    play_all(history, [0, 4, 1, 5])
    history.jump_to(2)
    history.play(8)
    assert len(history) == 4
    assert history.current_move == 3
    assert history.current_snapshot[8] is Cell.X
    assert history.current_snapshot[1] is Cell.EMPTY


def test_jump_back_from_won_game_reenables_play():
    history = HistoryManager()
    play_all(history, [0, 4, 1, 5, 2])
    history.jump_to(4)
    history.play(8)
    assert len(history) == 6
    assert history.current_snapshot[8] is Cell.X
    assert history.current_snapshot[2] is Cell.EMPTY


@pytest.mark.parametrize("move", [-1, 2, 10, "0", None])
def test_jump_out_of_range_raises(move):
    history = HistoryManager()
    history.play(0)
    with pytest.raises(InvalidIndex):
        history.jump_to(move)
    assert history.current_move == 1


def test_invalid_index_is_an_index_error():
    with pytest.raises(IndexError):
        HistoryManager().jump_to(5)


def test_list_moves_labels():
    history = HistoryManager()
    play_all(history, [0, 4])
    assert list(history.list_moves()) == [
        MoveEntry(0, "Go to game start"),
        MoveEntry(1, "Go to move #: 1"),
        MoveEntry(2, "Go to move #: 2"),
    ]
    assert [tuple(e) for e in history.list_moves()][1] == (1, "Go to move #: 1")


def test_list_moves_is_restartable_and_live():
    history = HistoryManager()
    moves = history.list_moves()
    assert len(list(moves)) == 1
    assert len(list(moves)) == 1
    history.play(0)
    assert [index for index, _ in moves] == [0, 1]


def test_to_dict():
    history = HistoryManager()
    history.play(2)
    data = history.to_dict()
    assert data["current_move"] == 1
    assert data["snapshots"][1] == [None, None, "X", None, None, None, None, None, None]
    assert Snapshot.from_list(data["snapshots"][1]) == history.current_snapshot


def test_snapshot_requires_nine_cells():
    with pytest.raises(ValueError):
        Snapshot((Cell.EMPTY,) * 8)
