#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


class Vec4:
    """Homogeneous clip-space point.

    Unlike Vec3 this one is mutable: perspective_divide() rewrites all four
    components in place and the pre-division w is gone afterwards.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float = 1.0) -> 'Vec4':
        return cls(v.x, v.y, v.z, w)

    def __repr__(self):
        return f"Vec4({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Vec4 index out of range")

    def perspective_divide(self) -> 'Vec4':
        """Divide every component by w, w included. Returns self for chaining."""
        w = self.w
        if w == 0.0:
            raise ValueError("cannot perspective-divide a point with w == 0")
        self.x /= w
        self.y /= w
        self.z /= w
        self.w /= w
        return self

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


class Mat4:
    """4x4 matrix, row-major, stored as m[row][col]."""
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            if len(data) != 4 or any(len(row) != 4 for row in data):
                raise ValueError("Mat4 needs 4 rows of 4 values")
            self.m = [[float(v) for v in row] for row in data]
        else:
            self.m = [[0.0]*4 for _ in range(4)]

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def from_flat(cls, values) -> 'Mat4':
        """Build from 16 scalars in row-major order."""
        values = list(values)
        if len(values) != 16:
            raise ValueError(f"Mat4.from_flat needs 16 values, got {len(values)}")
        return cls([values[r * 4:r * 4 + 4] for r in range(4)])

    def flat(self):
        return [v for row in self.m for v in row]

    def __repr__(self):
        rows = "; ".join(" ".join(f"{v:g}" for v in row) for row in self.m)
        return f"Mat4({rows})"

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            res = Mat4()
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        if isinstance(other, Vec4):
            return mat4_mul_vec4(self, other)
        return NotImplemented

    def mul_vec4(self, v: Vec4) -> Vec4:
        return mat4_mul_vec4(self, v)


def mat4_mul_vec4(m: Mat4, v: Vec4) -> Vec4:
    """Row-major 4x4 by 4x1 product. Pure, returns a new Vec4."""
    r = m.m
    return Vec4(
        r[0][0]*v.x + r[0][1]*v.y + r[0][2]*v.z + r[0][3]*v.w,
        r[1][0]*v.x + r[1][1]*v.y + r[1][2]*v.z + r[1][3]*v.w,
        r[2][0]*v.x + r[2][1]*v.y + r[2][2]*v.z + r[2][3]*v.w,
        r[3][0]*v.x + r[3][1]*v.y + r[3][2]*v.z + r[3][3]*v.w,
    )
