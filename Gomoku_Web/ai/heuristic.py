"""One-ply heuristic opponent: win now, else block, else play near the center."""

from contextlib import contextmanager
from enum import Enum

from . import move_selector
from ..Board import Stone
from ..engine import win_detector


class AIDifficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"


@contextmanager
def _simulate(board, x, y, stone):
    board._push_stone(x, y, stone)
    try:
        yield
    finally:
        board._pop_stone(x, y)


def find_winning_cell(board, stone):
    """First empty cell in row-major order where `stone` would complete five."""
    for p in move_selector.empty_cells(board):
        with _simulate(board, p.x, p.y, stone):
            if win_detector.is_win_after_move(board, p.x, p.y, stone):
                return p
    return None


def fallback_move(board):
    """Closest empty cell to the center, scanning rings outward."""
    return move_selector.first_empty(board, move_selector.ring_cells(board))


def choose_move(board, color=Stone.WHITE, difficulty=AIDifficulty.NORMAL):
    """
    Return the move for `color`, or None when the board is full.
    The board is left exactly as it was found.
    """
    color = Stone(color)
    if AIDifficulty(difficulty) == AIDifficulty.EASY:
        return next(move_selector.empty_cells(board), None)

    win_move = find_winning_cell(board, color)
    if win_move is not None:
        return win_move
    block_move = find_winning_cell(board, color.opposite())
    if block_move is not None:
        return block_move
    return fallback_move(board)
