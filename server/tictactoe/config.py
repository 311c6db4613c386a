"""Game and server configuration dataclasses."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import json


@dataclass
class GameConfig:
    """Per-game presentation and session limits."""
    draw_message: str = "Draw"
    max_sessions: int = 100

    def __post_init__(self):
        if self.max_sessions < 1:
            raise ValueError(f"max_sessions must be positive, got {self.max_sessions}")

    def to_dict(self) -> dict:
        return {
            "draw_message": self.draw_message,
            "max_sessions": self.max_sessions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameConfig:
        return cls(
            draw_message=data.get("draw_message", "Draw"),
            max_sessions=data.get("max_sessions", 100),
        )


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "0.0.0.0"
    port: int = 7000
    log_level: str = "INFO"
    client_dir: str | None = None  # defaults to the bundled tictactoe/web/static
    game: GameConfig = field(default_factory=GameConfig)

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "client_dir": self.client_dir,
            "game": self.game.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ServerConfig:
        return cls(
            host=data.get("host", "0.0.0.0"),
            port=data.get("port", 7000),
            log_level=data.get("log_level", "INFO").upper(),
            client_dir=data.get("client_dir"),
            game=GameConfig.from_dict(data.get("game", {})),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> ServerConfig:
        return cls.from_dict(json.loads(json_str))


def load_config(path: str | Path | None = None) -> ServerConfig:
    """Read a JSON config file, or return defaults when no path is given."""
    if path is None:
        return ServerConfig()
    return ServerConfig.from_json(Path(path).read_text(encoding="utf-8"))
