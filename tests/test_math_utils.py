"""Tests for the vector and matrix primitives."""

import pytest

from depth_cli_rasterizer.math_utils import Vec3, Vec4, Mat4, mat4_mul_vec4


class TestVec3:

    def test_components_are_floats(self):
        v = Vec3(1, 2, 3)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        assert isinstance(v.x, float)

    def test_immutable(self):
        v = Vec3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_arithmetic(self):
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        assert a + b == Vec3(5, 7, 9)
        assert b - a == Vec3(3, 3, 3)
        assert a * 2 == Vec3(2, 4, 6)
        assert b / 2 == Vec3(2, 2.5, 3)

    def test_dot_and_cross(self):
        x = Vec3(1, 0, 0)
        y = Vec3(0, 1, 0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vec3(0, 0, 1)
        assert y.cross(x) == Vec3(0, 0, -1)

    def test_indexing(self):
        v = Vec3(7, 8, 9)
        assert list(v) == [7.0, 8.0, 9.0]
        assert v[2] == 9.0
        with pytest.raises(IndexError):
            v[3]


class TestVec4:

    def test_from_vec3_defaults_w_to_one(self):
        v = Vec4.from_vec3(Vec3(1, 2, 3))
        assert list(v) == [1.0, 2.0, 3.0, 1.0]

    def test_perspective_divide_is_in_place(self):
        v = Vec4(2, 4, 6, 2)
        out = v.perspective_divide()
        assert out is v
        assert list(v) == [1.0, 2.0, 3.0, 1.0]

    def test_perspective_divide_zero_w(self):
        v = Vec4(1, 2, 3, 0)
        with pytest.raises(ValueError):
            v.perspective_divide()
        assert list(v) == [1.0, 2.0, 3.0, 0.0]

    def test_xyz(self):
        assert Vec4(1, 2, 3, 4).xyz() == Vec3(1, 2, 3)


class TestMat4:

    def test_identity_product(self):
        v = Vec4(1, -2, 3, 1)
        assert list(mat4_mul_vec4(Mat4.identity(), v)) == list(v)

    def test_row_major_layout(self):
        m = Mat4.from_flat(range(16))
        assert m.m[0] == [0.0, 1.0, 2.0, 3.0]
        assert m.m[3][0] == 12.0
        assert m.flat() == [float(i) for i in range(16)]

    def test_mul_vec4(self):
        m = Mat4.from_flat(range(16))
        v = Vec4(1, 1, 1, 1)
        assert list(m.mul_vec4(v)) == [6.0, 22.0, 38.0, 54.0]
        assert list(m @ v) == [6.0, 22.0, 38.0, 54.0]

    def test_mul_does_not_mutate(self):
        m = Mat4.from_flat(range(16))
        v = Vec4(1, 2, 3, 4)
        mat4_mul_vec4(m, v)
        assert list(v) == [1.0, 2.0, 3.0, 4.0]
        assert m.flat() == [float(i) for i in range(16)]

    def test_matmul_identity(self):
        m = Mat4.from_flat(range(16))
        assert m @ Mat4.identity() == m

    def test_from_flat_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Mat4.from_flat([1, 2, 3])
