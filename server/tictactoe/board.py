"""Board cells and win evaluation."""
from __future__ import annotations
from enum import Enum
from typing import Sequence

BOARD_SIZE = 9


class Cell(Enum):
    EMPTY = None
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        return self.value or ""


# Rows, columns, diagonals. Scan order decides which line is reported first.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def winning_line(cells: Sequence[Cell]) -> tuple[int, int, int] | None:
    """First line whose three cells hold the same non-empty symbol."""
    for a, b, c in WINNING_LINES:
        if cells[a] is not Cell.EMPTY and cells[a] == cells[b] == cells[c]:
            return (a, b, c)
    return None


def evaluate(cells: Sequence[Cell]) -> Cell | None:
    """Return the winning symbol, or None if no line is complete."""
    line = winning_line(cells)
    if line is None:
        return None
    return cells[line[0]]


def is_full(cells: Sequence[Cell]) -> bool:
    return all(c is not Cell.EMPTY for c in cells)


def is_draw(cells: Sequence[Cell]) -> bool:
    return evaluate(cells) is None and is_full(cells)
