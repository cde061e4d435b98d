# core/vector.py
import math
from typing import Iterable

from core.color import Color

class Vector3:
    """
    A 3D vector of floats supporting arithmetic, dot and cross products,
    normalization and rotations around the coordinate axes.

    The same type carries positions, directions and unclamped RGB radiance
    accumulators (x, y, z -> r, g, b).
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def uniform(cls, a: float) -> "Vector3":
        return cls(a, a, a)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Tinting by a color.
        if isinstance(other, Color):
            return Vector3(self.x * other.r, self.y * other.g, self.z * other.b)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def max(self, other: "Vector3") -> "Vector3":
        """
        Component-wise maximum, used to clamp radiance terms at zero.
        NaN components are replaced by the other operand.
        """
        return Vector3(
            self.x if self.x > other.x else other.x,
            self.y if self.y > other.y else other.y,
            self.z if self.z > other.z else other.z
        )

    def norm_sq(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def normalize(self) -> "Vector3":
        """
        Divides the vector by its norm.

        The zero vector yields NaN components. Radiance terms clamp them
        away with max().
        """
        l = self.norm()
        if l == 0:
            return Vector3(math.nan, math.nan, math.nan)
        return self / l

    def rotate_x(self, theta_deg: float) -> "Vector3":
        theta = math.radians(theta_deg)
        c, s = math.cos(theta), math.sin(theta)
        return Vector3(self.x, c * self.y - s * self.z, s * self.y + c * self.z)

    def rotate_y(self, theta_deg: float) -> "Vector3":
        theta = math.radians(theta_deg)
        c, s = math.cos(theta), math.sin(theta)
        return Vector3(c * self.x + s * self.z, self.y, -s * self.x + c * self.z)

    def rotate_z(self, theta_deg: float) -> "Vector3":
        theta = math.radians(theta_deg)
        c, s = math.cos(theta), math.sin(theta)
        return Vector3(c * self.x - s * self.y, s * self.x + c * self.y, self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def vector_sum(vectors: Iterable[Vector3]) -> Vector3:
    """
    Sums an iterable of vectors, starting from zero.
    """
    total = Vector3.zero()
    for v in vectors:
        total = total + v
    return total
