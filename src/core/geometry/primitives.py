"""
Geometric primitives: Vector3D and Quaternion.

Vectors are immutable values. Quaternions are only used as rotation operators:
a vector v is rotated by q as q * v * conj(q).
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector3D:
    """3D vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr) -> Vector3D:
        """Create from NumPy array (or any 3-sequence)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    @classmethod
    def any_unit_normal(cls, v: Vector3D) -> Vector3D:
        """
        Return some unit vector orthogonal to v.

        The helper axis is the coordinate axis least aligned with v, so the
        cross product never degenerates for a non-zero v.
        """
        ax, ay, az = abs(v.x), abs(v.y), abs(v.z)
        if ax <= ay and ax <= az:
            helper = cls(1.0, 0.0, 0.0)
        elif ay <= az:
            helper = cls(0.0, 1.0, 0.0)
        else:
            helper = cls(0.0, 0.0, 1.0)
        return v.cross(helper).normalize()

    def magnitude(self) -> float:
        """Vector magnitude (L2 norm)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3D:
        """Return unit vector in same direction."""
        mag = self.magnitude()
        if mag < 1e-14:
            raise ValueError("Cannot normalize zero vector")
        return Vector3D(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: Vector3D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotate_by(self, rotation: Quaternion) -> Vector3D:
        """Rotate this vector by a (unit) rotation quaternion."""
        return rotation.rotate(self)

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication."""
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        """Scalar division (zero raises ZeroDivisionError)."""
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.6f}, {self.y:.6f}, {self.z:.6f})"


ZERO = Vector3D(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Quaternion:
    """
    Quaternion w + xi + yj + zk.

    Rotation quaternions built with from_angle_axis() are unit-norm, so the
    conjugate is the inverse. Composing many of them accumulates round-off;
    callers that step a vector repeatedly accept that drift.
    """
    w: float
    x: float
    y: float
    z: float

    @classmethod
    def from_angle_axis(cls, angle: float, axis: Vector3D) -> Quaternion:
        """
        Rotation by `angle` radians about `axis` (right-hand rule).

        Args:
            angle: Rotation angle in radians
            axis: Rotation axis (normalized here, must be non-zero)

        Returns:
            Unit rotation quaternion (cos(angle/2), sin(angle/2) * axis)
        """
        unit = axis.normalize()
        half = angle / 2.0
        si = math.sin(half)
        return cls(math.cos(half), si * unit.x, si * unit.y, si * unit.z)

    @classmethod
    def from_vector(cls, v: Vector3D) -> Quaternion:
        """Pure quaternion (w=0) embedding of a vector."""
        return cls(0.0, v.x, v.y, v.z)

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(1.0, 0.0, 0.0, 0.0)

    @property
    def vector(self) -> Vector3D:
        """Imaginary (vector) part."""
        return Vector3D(self.x, self.y, self.z)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def norm(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def rotate(self, v: Vector3D) -> Vector3D:
        """Rotate v by computing q * v * conj(q)."""
        return (self * Quaternion.from_vector(v) * self.conjugate()).vector

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (non-commutative)."""
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def __repr__(self) -> str:
        return f"Quaternion({self.w:.6f}, {self.x:.6f}, {self.y:.6f}, {self.z:.6f})"
