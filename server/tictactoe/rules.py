"""Turn order and game status, derived from board content on every read."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .board import Cell, evaluate, is_full


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"

    @property
    def is_concluded(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass
class MoveResult:
    success: bool
    message: str


def player_for_move(move_index: int) -> Cell:
    """X moves from even positions, O from odd ones."""
    return Cell.X if move_index % 2 == 0 else Cell.O


def game_status(cells: Sequence[Cell]) -> GameStatus:
    if evaluate(cells) is not None:
        return GameStatus.WON
    if is_full(cells):
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS


def status_text(cells: Sequence[Cell], move_index: int,
                draw_message: str = "Draw") -> str:
    """Status line shown above the board."""
    winner = evaluate(cells)
    if winner is not None:
        return f"Winner: {winner.symbol}"
    if is_full(cells):
        return draw_message
    return f"Next player: {player_for_move(move_index).symbol}"
