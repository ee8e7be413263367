"""Five-in-a-row detection through the last played point (five or more wins)."""

from __future__ import annotations

from ..Board import Board, Point, Stone

DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]  # horizontal, vertical, diag-down, diag-up
WIN_LENGTH = 5


def _collect_dir(board: Board, x: int, y: int, dx: int, dy: int, stone: Stone) -> list[Point]:
    """Collect contiguous points of stone from (x,y) (exclusive) in (dx,dy)."""
    points = []
    cx, cy = x + dx, y + dy
    while board.in_bounds((cx, cy)) and board.get((cx, cy)) == stone:
        points.append(Point(cx, cy))
        cx += dx
        cy += dy
    return points


def run_through(board: Board, x: int, y: int, dx: int, dy: int, stone: Stone) -> list[Point]:
    """Return the full run through (x, y) along (dx, dy), ordered from the negative end."""
    backward = _collect_dir(board, x, y, -dx, -dy, stone)
    forward = _collect_dir(board, x, y, dx, dy, stone)
    return backward[::-1] + [Point(x, y)] + forward


def highlight_window(line: list[Point]) -> list[Point]:
    """Pick WIN_LENGTH points centered near the middle of an overlong run."""
    start = len(line) // 2 - 2
    start = max(0, min(start, len(line) - WIN_LENGTH))
    return line[start:start + WIN_LENGTH]


def find_winning_line(board: Board, point, stone: Stone) -> list[Point] | None:
    """
    Assumes stone is already placed at point.
    Returns the highlighted five points of the first winning direction, or None.
    """
    x, y = point
    for dx, dy in DIRECTIONS:
        line = run_through(board, x, y, dx, dy, stone)
        if len(line) >= WIN_LENGTH:
            return highlight_window(line)
    return None


def is_win_after_move(board: Board, x: int, y: int, stone: Stone) -> bool:
    return find_winning_line(board, (x, y), stone) is not None
