"""Game history tracking."""
from .action import MoveEntry, move_label
from .snapshot import Snapshot
from .manager import HistoryManager, MoveList

__all__ = [
    "MoveEntry",
    "move_label",
    "Snapshot",
    "HistoryManager",
    "MoveList",
]
