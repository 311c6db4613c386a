"""View model derived from the history on every read."""
from __future__ import annotations
from dataclasses import dataclass

from .board import Cell, evaluate, winning_line
from .config import GameConfig
from .history import HistoryManager
from .rules import GameStatus, game_status, status_text


@dataclass(frozen=True)
class MoveView:
    move: int
    label: str
    is_current: bool

    def to_dict(self) -> dict:
        return {
            "move": self.move,
            "label": self.label,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class GameView:
    """Everything the browser needs to draw the board, status and move list.

    Built fresh from a HistoryManager after each change; nothing here is
    stored back, so the status can never disagree with the board.
    """
    squares: tuple[Cell, ...]
    status: GameStatus
    status_text: str
    winner: Cell | None
    winning_line: tuple[int, int, int] | None
    next_player: Cell | None
    current_move: int
    moves: tuple[MoveView, ...]

    @classmethod
    def derive(cls, history: HistoryManager,
               config: GameConfig | None = None) -> GameView:
        config = config or GameConfig()
        board = history.current_snapshot
        current = history.current_move
        status = game_status(board)
        return cls(
            squares=tuple(board),
            status=status,
            status_text=status_text(board, current, config.draw_message),
            winner=evaluate(board),
            winning_line=winning_line(board),
            next_player=None if status.is_concluded else history.next_player,
            current_move=current,
            moves=tuple(
                MoveView(entry.move_index, entry.label, entry.move_index == current)
                for entry in history.list_moves()
            ),
        )

    def to_dict(self) -> dict:
        return {
            "squares": [c.value for c in self.squares],
            "status": self.status.value,
            "status_text": self.status_text,
            "winner": self.winner.value if self.winner else None,
            "winning_line": list(self.winning_line) if self.winning_line else None,
            "next_player": self.next_player.value if self.next_player else None,
            "current_move": self.current_move,
            "moves": [m.to_dict() for m in self.moves],
        }
