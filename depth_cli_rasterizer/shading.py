#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/shading.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Shaders map a resolved depth value to the Cell stored in the canvas.

Any callable ``depth -> Cell`` works; the ones here are the policies the
renderer knows how to select from configuration.
"""

from .canvas import Cell
from .color import Color, build_gradient

MODES = ('monochrome', 'color')

BLOCK = '█'

# '0' + (depth + 1) * 5 spans '0'..':' for depths in [-1, 1]
_MONO_BASE = ord('0')
_MONO_MAX_OFFSET = 10


def monochrome_shader(depth: float) -> Cell:
    offset = int((depth + 1.0) * 5.0)
    if offset < 0:
        offset = 0
    elif offset > _MONO_MAX_OFFSET:
        offset = _MONO_MAX_OFFSET
    return Cell(chr(_MONO_BASE + offset))


def grayscale_shader(depth: float) -> Cell:
    c = Color.gray((depth + 1.0) * 128.0)
    return Cell(BLOCK, c, c)


class GradientShader:
    """
    Maps depth in [-1, 1] onto a precomputed RGB gradient between a near
    and a far color. Depths outside the range saturate at the end colors.
    """
    __slots__ = ('near_rgb', 'far_rgb', 'steps', 'palette', 'last_idx')

    def __init__(self, near_rgb, far_rgb, steps: int = 16):
        if steps < 2:
            raise ValueError(f"gradient needs at least 2 steps, got {steps}")
        self.near_rgb = Color(*near_rgb)
        self.far_rgb = Color(*far_rgb)
        self.steps = steps
        self.palette = build_gradient(self.near_rgb, self.far_rgb, steps)
        self.last_idx = steps - 1

    def index_for(self, depth: float) -> int:
        rel = (depth + 1.0) / 2.0
        idx = int(rel * self.last_idx)
        if idx < 0: return 0
        if idx > self.last_idx: return self.last_idx
        return idx

    def __call__(self, depth: float) -> Cell:
        c = self.palette[self.index_for(depth)]
        return Cell(BLOCK, c, c)

    def __repr__(self):
        return (f"GradientShader(near={self.near_rgb}, far={self.far_rgb}, "
                f"steps={self.steps})")


def make_shader(mode: str, near_rgb=None, far_rgb=None, steps: int = 16):
    """
    Select a shader by mode.

    'monochrome' -> monochrome_shader
    'color'      -> grayscale_shader, or a GradientShader when both
                    endpoint colors are given
    """
    if mode == 'monochrome':
        return monochrome_shader
    if mode == 'color':
        if near_rgb is not None and far_rgb is not None:
            return GradientShader(near_rgb, far_rgb, steps)
        return grayscale_shader
    raise ValueError(f"unknown shading mode {mode!r}, expected one of {MODES}")
