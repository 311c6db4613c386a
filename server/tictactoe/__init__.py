from .board import Cell, WINNING_LINES, evaluate, winning_line, is_full, is_draw
from .errors import TicTacToeError, InvalidIndex, GameNotFound
from .history import HistoryManager, MoveEntry, Snapshot
from .rules import GameStatus, MoveResult, game_status, player_for_move, status_text
from .state import GameView
from .config import GameConfig, ServerConfig, load_config
from .sessions import SessionRegistry

__version__ = "1.0.0"
