"""Move-list entries for history navigation."""
from __future__ import annotations
from dataclasses import dataclass

START_LABEL = "Go to game start"


def move_label(move_index: int) -> str:
    if move_index == 0:
        return START_LABEL
    return f"Go to move #: {move_index}"


@dataclass(frozen=True)
class MoveEntry:
    """Immutable (move index, label) pair shown in the move list."""
    move_index: int
    label: str

    @classmethod
    def for_index(cls, move_index: int) -> MoveEntry:
        return cls(move_index, move_label(move_index))

    def __iter__(self):
        # Unpacks as a plain pair: `for index, label in history.list_moves()`
        yield self.move_index
        yield self.label

    def to_dict(self) -> dict:
        return {
            "move": self.move_index,
            "label": self.label,
        }
