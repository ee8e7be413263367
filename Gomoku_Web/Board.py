"""Board state container: stones, points, and bounds-checked cell access."""

from enum import IntEnum
from typing import NamedTuple

from .engine.errors import CellOccupied, OutOfBounds


class Stone(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def glyph(self):
        return GLYPHS[self]

    def opposite(self):
        if self == Stone.BLACK:
            return Stone.WHITE
        return Stone.BLACK

    def __str__(self):
        return self.glyph


GLYPHS = {Stone.EMPTY: ".", Stone.BLACK: "●", Stone.WHITE: "○"}


class Point(NamedTuple):
    x: int
    y: int


class Board:
    def __init__(self, size=15):
        if size <= 0:
            raise ValueError("board size must be positive")
        self.size = size
        self.cells = [[Stone.EMPTY] * size for _ in range(size)]

    def in_bounds(self, p):
        x, y = p
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, p):
        """Return the stone at p; raise OutOfBounds outside the grid."""
        if not self.in_bounds(p):
            raise OutOfBounds()
        x, y = p
        return self.cells[y][x]

    def set(self, p, stone):
        """Place a stone; raise if out of bounds or occupied."""
        if not self.in_bounds(p):
            raise OutOfBounds()
        x, y = p
        if self.cells[y][x] != Stone.EMPTY:
            raise CellOccupied()
        self.cells[y][x] = Stone(stone)

    def is_empty(self, p):
        return self.in_bounds(p) and self.get(p) == Stone.EMPTY

    def is_full(self):
        return all(v != Stone.EMPTY for row in self.cells for v in row)

    def rows(self):
        """Copy of the grid as plain ints, row by row (y outer)."""
        return [[int(v) for v in row] for row in self.cells]

    def render(self):
        header = "   " + " ".join(f"{x % 10}" for x in range(self.size))
        lines = [header]
        for y, row in enumerate(self.cells):
            lines.append(f"{y:2d} " + " ".join(v.glyph for v in row))
        return "\n".join(lines)

    # Hypothetical placement used by the move search; bypasses occupancy checks.
    def _push_stone(self, x, y, stone):
        if not self.in_bounds((x, y)):
            raise OutOfBounds()
        self.cells[y][x] = stone

    def _pop_stone(self, x, y):
        if not self.in_bounds((x, y)):
            raise OutOfBounds()
        self.cells[y][x] = Stone.EMPTY
