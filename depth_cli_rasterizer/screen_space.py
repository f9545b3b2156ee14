#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/screen_space.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional


class BoundingBox(NamedTuple):
    """Inclusive pixel rectangle."""
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def width(self) -> int:
        return self.x_max - self.x_min + 1

    def height(self) -> int:
        return self.y_max - self.y_min + 1

    def pixels(self):
        """Yield (x, y) in row-major order, same order as a full buffer scan."""
        for y in range(self.y_min, self.y_max + 1):
            for x in range(self.x_min, self.x_max + 1):
                yield x, y


def to_cartesian(coord: int, extent: int) -> float:
    """Map a pixel index in [0, extent-1] to normalized device space [-1, 1]."""
    if extent <= 1:
        raise ValueError(f"extent must be > 1, got {extent}")
    return (coord * 2.0) / (extent - 1) - 1


def from_cartesian(value: float, extent: int) -> float:
    """Inverse of to_cartesian. Returns a (possibly fractional) pixel coordinate."""
    if extent <= 1:
        raise ValueError(f"extent must be > 1, got {extent}")
    return (value + 1.0) * (extent - 1) / 2.0


def bounding_box(a, b, c, w: int, h: int) -> Optional[BoundingBox]:
    """
    Pixel-space box around the projected, perspective-divided points a, b, c,
    clamped to the buffer. Returns None when the triangle lies fully off-screen.

    The box is padded by one pixel each side so float error in the inverse
    mapping never drops a pixel that a full-buffer scan would have covered.
    """
    lo_x = math.floor(from_cartesian(min(a.x, b.x, c.x), w)) - 1
    hi_x = math.ceil(from_cartesian(max(a.x, b.x, c.x), w)) + 1
    lo_y = math.floor(from_cartesian(min(a.y, b.y, c.y), h)) - 1
    hi_y = math.ceil(from_cartesian(max(a.y, b.y, c.y), h)) + 1

    if hi_x < 0 or hi_y < 0 or lo_x > w - 1 or lo_y > h - 1:
        return None

    return BoundingBox(
        max(0, lo_x), min(w - 1, hi_x),
        max(0, lo_y), min(h - 1, hi_y),
    )


def full_box(w: int, h: int) -> BoundingBox:
    """The whole buffer as a box, for scans without the bbox optimization."""
    return BoundingBox(0, w - 1, 0, h - 1)
