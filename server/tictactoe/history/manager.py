"""History manager: the authoritative list of board snapshots."""
from __future__ import annotations
import logging
from typing import Iterator

from ..board import BOARD_SIZE, Cell
from ..errors import InvalidIndex
from ..rules import MoveResult, game_status, player_for_move
from .action import MoveEntry
from .snapshot import Snapshot

_log = logging.getLogger(__name__)


class MoveList:
    """Restartable view over the move list; each iteration re-reads the history."""

    def __init__(self, manager: HistoryManager):
        self._manager = manager

    def __iter__(self) -> Iterator[MoveEntry]:
        for i in range(len(self._manager)):
            yield MoveEntry.for_index(i)

    def __len__(self) -> int:
        return len(self._manager)


class HistoryManager:
    """Linear history of snapshots plus the index of the one being viewed.

    Playing from an earlier position discards every later snapshot; there is
    no branch tree. Jumping only moves the viewed index.
    """

    def __init__(self):
        self._snapshots: list[Snapshot] = [Snapshot.empty()]
        self._current_move = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    @property
    def current_move(self) -> int:
        return self._current_move

    @property
    def current_snapshot(self) -> Snapshot:
        return self._snapshots[self._current_move]

    @property
    def next_player(self) -> Cell:
        return player_for_move(self._current_move)

    def check_move(self, cell_index: int) -> MoveResult:
        """Check whether `cell_index` can be played on the viewed board."""
        if not isinstance(cell_index, int) or isinstance(cell_index, bool):
            return MoveResult(False, f"Cell must be an integer, got {cell_index!r}")
        if not 0 <= cell_index < BOARD_SIZE:
            return MoveResult(False, f"Cell {cell_index} out of range 0-{BOARD_SIZE - 1}")
        board = self.current_snapshot
        if game_status(board).is_concluded:
            return MoveResult(False, "Game is already over")
        if board[cell_index] is not Cell.EMPTY:
            return MoveResult(False, f"Cell {cell_index} is already taken by {board[cell_index].symbol}")
        return MoveResult(True, "ok")

    def play(self, cell_index: int) -> None:
        """Place the mover's symbol; illegal moves are ignored."""
        result = self.check_move(cell_index)
        if not result.success:
            _log.debug("Ignored move at %r: %s", cell_index, result.message)
            return

        next_snapshot = self.current_snapshot.place(cell_index, self.next_player)
        del self._snapshots[self._current_move + 1:]
        self._snapshots.append(next_snapshot)
        self._current_move = len(self._snapshots) - 1

    def jump_to(self, move_index: int) -> None:
        """View the board after `move_index` moves. History is left as is."""
        if (not isinstance(move_index, int) or isinstance(move_index, bool)
                or not 0 <= move_index < len(self._snapshots)):
            raise InvalidIndex(move_index, len(self._snapshots))
        self._current_move = move_index

    def list_moves(self) -> MoveList:
        return MoveList(self)

    def to_dict(self) -> dict:
        return {
            "snapshots": [s.to_list() for s in self._snapshots],
            "current_move": self._current_move,
        }
