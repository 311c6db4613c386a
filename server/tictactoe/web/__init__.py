"""Browser front end for the tic-tac-toe game: FastAPI routes plus the static client."""
