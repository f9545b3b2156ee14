#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Vec4, Mat4, mat4_mul_vec4
from .projection import get_projection, project, DEFAULT_FRUSTUM
from .screen_space import BoundingBox, to_cartesian, from_cartesian, bounding_box
from .rasterizer import (DegenerateTriangleError, inside_triangle,
                         get_z_component, fill_triangle)
from .color import Color, parse_hex_color
from .canvas import Canvas, Cell
from .shading import monochrome_shader, grayscale_shader, GradientShader, make_shader
from .sink import format_bordered, format_ansi, write_bordered, write_ansi
from .mesh import Triangle, demo_quad
from .config import RenderConfig
from .renderer import Renderer
