#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Vec4, Mat4, mat4_mul_vec4

DEFAULT_FRUSTUM = (-1.0, 1.0, -1.0, 1.0, 1.0, 2.0)


def get_projection(left: float, right: float, top: float, bottom: float,
                   near: float, far: float) -> Mat4:
    """
    Off-axis perspective projection for the given view-frustum bounds.

    The last row copies camera-space z into w, so dividing by w after the
    multiply yields normalized device coordinates. Depth maps near -> -1
    and far -> +1.
    """
    if left == right:
        raise ValueError("frustum left and right must differ")
    if top == bottom:
        raise ValueError("frustum top and bottom must differ")
    if near == far:
        raise ValueError("frustum near and far must differ")

    l, r, t, b, n, f = left, right, top, bottom, near, far
    return Mat4.from_flat([
        2.0 * n / (r - l), 0.0,               (l + r) / (l - r), 0.0,
        0.0,               2.0 * n / (b - t), (t + b) / (t - b), 0.0,
        0.0,               0.0,               (f + n) / (f - n), 2.0 * n * f / (n - f),
        0.0,               0.0,               1.0,               0.0,
    ])


def project(matrix: Mat4, v: Vec3) -> Vec4:
    """Project a camera-space point and perspective-divide it (w -> 1)."""
    clip = mat4_mul_vec4(matrix, Vec4.from_vec3(v, 1.0))
    if clip.w == 0.0:
        raise ValueError(f"{v!r} projects to w == 0 (camera-space z of 0)")
    return clip.perspective_divide()
