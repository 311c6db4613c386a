"""In-memory registry of running games, one HistoryManager per game."""
from __future__ import annotations
import logging
from collections import OrderedDict

from .config import GameConfig
from .errors import GameNotFound
from .history import HistoryManager

_log = logging.getLogger(__name__)


class SessionRegistry:
    """Owns every live game. Oldest games are dropped once the limit is hit."""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._games: OrderedDict[int, HistoryManager] = OrderedDict()
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: int) -> bool:
        return game_id in self._games

    def create(self) -> tuple[int, HistoryManager]:
        """Start a new game. Returns (game_id, history)."""
        while len(self._games) >= self.config.max_sessions:
            old_id, _ = self._games.popitem(last=False)
            _log.info("Evicted game %d (limit %d)", old_id, self.config.max_sessions)

        game_id = self._next_id
        self._next_id += 1
        history = HistoryManager()
        self._games[game_id] = history
        _log.info("Created game %d", game_id)
        return game_id, history

    def get(self, game_id: int) -> HistoryManager:
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFound(game_id) from None

    def discard(self, game_id: int) -> None:
        if self._games.pop(game_id, None) is None:
            raise GameNotFound(game_id)
        _log.info("Discarded game %d", game_id)
