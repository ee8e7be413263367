"""Error taxonomy for rejected moves. Every error leaves the game untouched."""

from enum import Enum


class ErrorKind(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"
    INVALID_TURN = "invalid_turn"


class GameError(ValueError):
    kind: ErrorKind
    message = "invalid move"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class OutOfBounds(GameError):
    kind = ErrorKind.OUT_OF_BOUNDS
    message = "coordinates are outside the board"


class CellOccupied(GameError):
    kind = ErrorKind.CELL_OCCUPIED
    message = "cell is already occupied"


class GameOver(GameError):
    kind = ErrorKind.GAME_OVER
    message = "game is over"


class InvalidTurn(GameError):
    # Only reachable if the turn field is corrupted.
    kind = ErrorKind.INVALID_TURN
    message = "invalid turn"
