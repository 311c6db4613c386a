"""Exceptions raised by the game package."""


class TicTacToeError(Exception):
    """Base class for game errors."""


class InvalidIndex(TicTacToeError, IndexError):
    """A history position outside the recorded moves was requested."""

    def __init__(self, move_index, history_length: int):
        self.move_index = move_index
        self.history_length = history_length
        super().__init__(
            f"Move {move_index!r} not in history (0..{history_length - 1})"
        )


class GameNotFound(TicTacToeError, KeyError):
    """No session is registered under the given game id."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")

    def __str__(self) -> str:
        return self.args[0]
