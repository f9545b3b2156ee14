#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys

from .canvas import Canvas, BLANK_MONO, BLANK_COLOR
from .config import RenderConfig
from .math_utils import Vec3
from .projection import get_projection, project
from .rasterizer import fill_triangle
from .shading import make_shader
from .sink import write_ansi, write_bordered

logger = logging.getLogger(__name__)


class Renderer:
    """
    Owns one Canvas and draws triangles into it.

    Lifecycle: construct -> draw() any number of times -> render() -> discard.
    The projection matrix is derived from config.frustum once, at
    construction.
    """

    def __init__(self, config: RenderConfig = None, shader=None):
        self.config = config if config is not None else RenderConfig()
        cfg = self.config
        self.projection = get_projection(*cfg.frustum)
        self.shader = shader if shader is not None else make_shader(
            cfg.mode, cfg.near_color, cfg.far_color, cfg.gradient_steps)
        blank = BLANK_COLOR if cfg.is_color else BLANK_MONO
        self.canvas = Canvas(cfg.width, cfg.height, blank)

    def draw(self, v1: Vec3, v2: Vec3, v3: Vec3) -> int:
        """
        Project the three vertices and rasterize them. Returns the number
        of cells written. Raises ValueError before touching the canvas if a
        vertex projects to w == 0.
        """
        p1 = project(self.projection, v1)
        p2 = project(self.projection, v2)
        p3 = project(self.projection, v3)
        logger.debug("Projected %r %r %r -> %r %r %r", v1, v2, v3, p1, p2, p3)
        return fill_triangle(self.canvas, p1, p2, p3, self.shader,
                             use_bbox=self.config.use_bbox)

    def draw_triangle(self, tri) -> int:
        return self.draw(tri.v1, tri.v2, tri.v3)

    def draw_all(self, triangles) -> int:
        return sum(self.draw_triangle(t) for t in triangles)

    def render(self, stream=None):
        """Write the resolved canvas to stream (stdout by default)."""
        stream = stream if stream is not None else sys.stdout
        if self.config.is_color:
            write_ansi(self.canvas, stream, truecolor=self.config.truecolor)
        else:
            write_bordered(self.canvas, stream)
