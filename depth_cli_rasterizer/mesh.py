#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple

from .math_utils import Vec3


class Triangle(NamedTuple):
    """Three camera-space vertices, consistently wound."""
    v1: Vec3
    v2: Vec3
    v3: Vec3

    @classmethod
    def from_points(cls, p1, p2, p3) -> 'Triangle':
        """Build from any three (x, y, z) sequences."""
        return cls(Vec3(*p1), Vec3(*p2), Vec3(*p3))


def demo_quad():
    """Two triangles sharing an edge, forming a quad tilted in depth."""
    v1 = Vec3( 1.0, -1.0, 1.5)
    v2 = Vec3( 1.0,  1.0, 1.1)
    v3 = Vec3(-1.0,  1.0, 1.5)
    v4 = Vec3(-1.0, -1.0, 1.9)
    return [
        Triangle(v1, v2, v3),
        Triangle(v1, v3, v4),
    ]
