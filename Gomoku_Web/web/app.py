"""
FastAPI application exposing the server's single game.

Routes:
- GET  /api/state  current board, turn, move count, winner and winning line.
- POST /api/move   play at (x, y); returns the new state or a 400 error with
                   the rejection kind (out_of_bounds, cell_occupied,
                   game_over, invalid_turn).

Handlers are sync: FastAPI runs them in its thread pool, and GameService
serializes access to the shared game with its lock.
"""

from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..engine.errors import GameError
from .service import GameService

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    x: int
    y: int


class StateResponse(BaseModel):
    """
    Snapshot of the game.

    Cells and colors are integers: 0 empty, 1 black, 2 white. `winner` is 0
    while the game is in progress; `winning_line` holds five [x, y] pairs once
    someone has won.
    """

    size: int
    turn: int
    moves: int
    board: List[List[int]]
    winner: int
    winning_line: Optional[List[List[int]]] = None


class ErrorResponse(BaseModel):
    error: str
    kind: Optional[str] = None


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(service: GameService) -> FastAPI:
    app = FastAPI(title="Gomoku", version="1.0.0")

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="invalid json").model_dump(exclude_none=True),
            headers=NO_CACHE_HEADERS,
        )

    @app.exception_handler(GameError)
    async def rejected_move(request: Request, exc: GameError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=str(exc), kind=exc.kind.value).model_dump(),
            headers=NO_CACHE_HEADERS,
        )

    @app.get("/api/state", response_model=StateResponse)
    def api_state() -> JSONResponse:
        return _state_response(service.state())

    @app.post("/api/move", response_model=StateResponse, responses={400: {"model": ErrorResponse}})
    def api_move(move: MoveRequest) -> JSONResponse:
        return _state_response(service.play(move.x, move.y))

    return app


def _state_response(snapshot: dict) -> JSONResponse:
    body = StateResponse(**snapshot)
    return JSONResponse(content=body.model_dump(), headers=NO_CACHE_HEADERS)
