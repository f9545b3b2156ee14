#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple

from .color import Color, BLACK


class Cell(NamedTuple):
    """One screen slot: a printable glyph plus foreground/background colors."""
    glyph: str
    fg: Color = BLACK
    bg: Color = BLACK


BLANK_MONO = Cell('.')
BLANK_COLOR = Cell(' ')

# Depth tolerance of the write gate. A candidate is accepted when it is at
# most this far behind the currently stored depth.
DEPTH_SLACK = 1.0


class Canvas:
    """
    Fixed-size frame buffer: a W x H grid of Cells and a parallel grid of
    float depths, both flat and indexed by row * W + col.

    Depths start at 0.0. The write gate is tolerant rather than strict
    nearest-wins: a candidate passes when stored + DEPTH_SLACK >= depth, so
    a later, slightly farther surface can overwrite an earlier one.
    """
    __slots__ = ['w', 'h', 'blank', 'cells', 'depth']

    def __init__(self, w: int, h: int, blank: Cell = BLANK_MONO):
        if w < 2 or h < 2:
            raise ValueError(f"canvas must be at least 2x2, got {w}x{h}")
        self.w, self.h = w, h
        self.blank = blank
        self.cells = [blank] * (w * h)
        self.depth = [0.0] * (w * h)

    def _index(self, x: int, y: int) -> int:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            raise IndexError(f"({x}, {y}) outside {self.w}x{self.h} canvas")
        return y * self.w + x

    def at(self, x: int, y: int) -> Cell:
        return self.cells[self._index(x, y)]

    def depth_at(self, x: int, y: int) -> float:
        return self.depth[self._index(x, y)]

    def accepts(self, x: int, y: int, depth: float) -> bool:
        """Would a write at this depth pass the gate? Does not mutate."""
        return self.depth[self._index(x, y)] + DEPTH_SLACK >= depth

    def write(self, x: int, y: int, depth: float, cell: Cell) -> bool:
        i = self._index(x, y)
        if self.depth[i] + DEPTH_SLACK < depth:
            return False
        self.depth[i] = depth
        self.cells[i] = cell
        return True

    def rows(self):
        """Yield each row top to bottom as a tuple of Cells."""
        w = self.w
        cells = self.cells
        for y in range(self.h):
            yield tuple(cells[y * w:(y + 1) * w])

    def clear(self):
        n = self.w * self.h
        self.cells = [self.blank] * n
        self.depth = [0.0] * n
