#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import Canvas
from .math_utils import Vec3
from .screen_space import to_cartesian, bounding_box, full_box

logger = logging.getLogger(__name__)


class DegenerateTriangleError(ValueError):
    """The projected triangle has zero area, so its plane has no z term."""


def edge_function(p0, p1, x: float, y: float) -> float:
    """Signed area of (p0, p1, (x, y)); >= 0 on the inner side of p0 -> p1."""
    return (x - p0.x) * (p1.y - p0.y) - (y - p0.y) * (p1.x - p0.x)


def inside_triangle(a, b, c, x: float, y: float) -> bool:
    """
    Boundary-inclusive containment test on projected points.
    Winding-sensitive: a reversed triangle covers nothing.
    """
    return (edge_function(b, a, x, y) >= 0 and
            edge_function(c, b, x, y) >= 0 and
            edge_function(a, c, x, y) >= 0)


def plane_equation(a, b, c):
    """
    Coefficients (x_p, y_p, z_p, w_p) of the plane through a, b, c with
    x_p*X + y_p*Y + z_p*Z + w_p = 0.
    """
    pa = Vec3(a.x, a.y, a.z)
    normal = (Vec3(b.x, b.y, b.z) - pa).cross(Vec3(c.x, c.y, c.z) - pa)
    return normal.x, normal.y, normal.z, -normal.dot(pa)


def _solve_z(plane, x: float, y: float) -> float:
    x_p, y_p, z_p, w_p = plane
    return (-x_p * x - y_p * y - w_p) / z_p


def get_z_component(a, b, c, x: float, y: float) -> float:
    """Depth at (x, y) on the plane of the projected triangle a, b, c."""
    plane = plane_equation(a, b, c)
    if plane[2] == 0.0:
        raise DegenerateTriangleError("projected triangle has zero area")
    return _solve_z(plane, x, y)


def fill_triangle(canvas: Canvas, a, b, c, shader, use_bbox: bool = True) -> int:
    """
    Rasterize one projected, perspective-divided triangle into the canvas.

    Every covered pixel's depth is offered to the canvas write gate and the
    shader runs only for accepted writes. Scanning the bounding box or the
    whole canvas gives the same result. Returns the number of cells written.
    """
    plane = plane_equation(a, b, c)
    if plane[2] == 0.0:
        logger.debug("Skipping degenerate triangle %r %r %r", a, b, c)
        return 0

    w, h = canvas.w, canvas.h
    if use_bbox:
        box = bounding_box(a, b, c, w, h)
        if box is None:
            logger.debug("Triangle is off-screen, nothing to scan")
            return 0
    else:
        box = full_box(w, h)
    logger.debug("Scanning %r", box)

    # NDC columns are reused across rows
    xs = [(x, to_cartesian(x, w)) for x in range(box.x_min, box.x_max + 1)]

    written = 0
    for y in range(box.y_min, box.y_max + 1):
        ny = to_cartesian(y, h)
        for x, nx in xs:
            if not inside_triangle(a, b, c, nx, ny):
                continue
            d = _solve_z(plane, nx, ny)
            if canvas.accepts(x, y, d):
                canvas.write(x, y, d, shader(d))
                written += 1

    logger.debug("Wrote %d cells", written)
    return written
