"""Scan orders over board cells: row-major empties and center-out rings."""

from ..Board import Point, Stone


def empty_cells(board):
    """Yield empty cells in row-major order (y outer, x inner)."""
    size = board.size
    for y in range(size):
        for x in range(size):
            p = Point(x, y)
            if board.get(p) == Stone.EMPTY:
                yield p


def ring_cells(board, center=None):
    """
    Yield in-bounds cells on rings r = 0, 1, 2, ... around center.
    Each ring is the full (2r+1)^2 square scanned dy outer, dx inner, so inner
    cells are revisited; callers take the first empty one.
    """
    size = board.size
    if center is None:
        center = (size // 2, size // 2)
    cx, cy = center
    for r in range(size):
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                p = Point(cx + dx, cy + dy)
                if board.in_bounds(p):
                    yield p


def first_empty(board, points):
    for p in points:
        if board.is_empty(p):
            return p
    return None
