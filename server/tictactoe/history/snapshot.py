"""Immutable board snapshots."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from ..board import BOARD_SIZE, Cell


@dataclass(frozen=True)
class Snapshot:
    """Complete board at one point in the game. Never mutated."""
    cells: tuple[Cell, ...]

    def __post_init__(self):
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(f"Snapshot needs {BOARD_SIZE} cells, got {len(self.cells)}")

    @classmethod
    def empty(cls) -> Snapshot:
        return cls((Cell.EMPTY,) * BOARD_SIZE)

    def place(self, index: int, cell: Cell) -> Snapshot:
        """Return a copy with `index` set to `cell`."""
        cells = list(self.cells)
        cells[index] = cell
        return Snapshot(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def changed_cells(self, other: Snapshot) -> list[int]:
        """Indices where this snapshot and `other` differ."""
        return [i for i, (a, b) in enumerate(zip(self.cells, other.cells)) if a != b]

    def to_list(self) -> list[str | None]:
        return [c.value for c in self.cells]

    @classmethod
    def from_list(cls, data: list[str | None]) -> Snapshot:
        return cls(tuple(Cell(v) for v in data))
