"""Pre-move checks on game state: finished games and corrupted turns."""

from ..Board import Stone
from .errors import GameOver, InvalidTurn


def check_turn(turn, winner):
    """
    Validate that the game still accepts a move from `turn`.
    Raises GameOver/InvalidTurn; bounds and occupancy are left to Board.set.
    """
    if winner != Stone.EMPTY:
        raise GameOver()
    if turn not in (Stone.BLACK, Stone.WHITE):
        raise InvalidTurn()
    return True
