"""FastAPI server for the tic-tac-toe game."""
from __future__ import annotations
import argparse
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, StrictInt

from ..config import ServerConfig, load_config
from ..errors import GameNotFound, InvalidIndex
from ..history import HistoryManager
from ..sessions import SessionRegistry
from ..state import GameView

_log = logging.getLogger(__name__)

DEFAULT_CLIENT_DIR = Path(__file__).parent / "static"


class PlayRequest(BaseModel):
    """Request body for a cell click."""
    cell: StrictInt


class JumpRequest(BaseModel):
    """Request body for a move-list click."""
    move: StrictInt


def create_app(config: ServerConfig | None = None) -> FastAPI:
    config = config or ServerConfig()
    app = FastAPI(title="Tic-Tac-Toe")
    registry = SessionRegistry(config.game)
    app.state.registry = registry

    def lookup(game_id: int) -> HistoryManager:
        try:
            return registry.get(game_id)
        except GameNotFound as e:
            raise HTTPException(status_code=404, detail=str(e)) from e

    def state_message(game_id: int, history: HistoryManager) -> dict:
        return {
            "status": "ok",
            "game_id": game_id,
            "state": GameView.derive(history, config.game).to_dict(),
        }

    # Static files
    client_path = Path(config.client_dir) if config.client_dir else DEFAULT_CLIENT_DIR
    if client_path.exists():
        app.mount("/static", StaticFiles(directory=str(client_path)), name="static")

    @app.get("/")
    async def get_index():
        """Serve the main page."""
        index_path = client_path / "index.html"
        if index_path.exists():
            return FileResponse(index_path)
        return HTMLResponse("<h1>Tic-Tac-Toe</h1><p>Client not found</p>")

    # ==================== Games ====================

    @app.post("/api/new-game")
    async def new_game():
        """Start a game on an empty board."""
        game_id, history = registry.create()
        return state_message(game_id, history)

    @app.get("/api/game/{game_id}")
    async def get_game(game_id: int):
        """Current view of a game."""
        return state_message(game_id, lookup(game_id))

    @app.delete("/api/game/{game_id}")
    async def delete_game(game_id: int):
        """Forget a game."""
        lookup(game_id)
        registry.discard(game_id)
        return {"status": "ok", "game_id": game_id}

    # ==================== Moves ====================

    @app.post("/api/game/{game_id}/play")
    async def play(game_id: int, request: PlayRequest):
        """Play the clicked cell. Illegal clicks leave the game unchanged."""
        history = lookup(game_id)
        history.play(request.cell)
        return state_message(game_id, history)

    # ==================== History ====================

    @app.post("/api/game/{game_id}/jump")
    async def jump(game_id: int, request: JumpRequest):
        """View the board as it was after the given move."""
        history = lookup(game_id)
        try:
            history.jump_to(request.move)
        except InvalidIndex as e:
            _log.warning("Game %d: %s", game_id, e)
            raise HTTPException(status_code=400, detail=str(e)) from e
        return state_message(game_id, history)

    @app.get("/api/game/{game_id}/moves")
    async def get_moves(game_id: int):
        """Move-list labels, one per recorded board."""
        history = lookup(game_id)
        return {
            "status": "ok",
            "moves": [entry.to_dict() for entry in history.list_moves()],
        }

    @app.get("/api/game/{game_id}/history")
    async def get_history(game_id: int):
        """Raw snapshots and the viewed position."""
        history = lookup(game_id)
        return {"status": "ok", "history": history.to_dict()}

    return app


app = create_app()


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Tic-Tac-Toe web server")
    p.add_argument("--config", default=None, help="path to a JSON config file")
    p.add_argument("--host", default=None, help="override bind address")
    p.add_argument("--port", type=int, default=None, help="override port")
    return p.parse_args(argv)


def build_config(args) -> ServerConfig:
    """Load the config file, then apply command-line overrides."""
    config = load_config(args.config)
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    return config


def main(argv=None):
    import uvicorn

    config = build_config(parse_args(argv))

    logging.basicConfig(level=config.log_level)
    _log.info("Serving on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port,
                log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
