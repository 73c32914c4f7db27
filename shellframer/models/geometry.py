"""Geometric primitives used throughout the framer.

All values are immutable: every operation returns a new instance.
"""

from __future__ import annotations
import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def unit(self) -> Vector3D:
        return _UNIT_VECTORS[self]

    @property
    def in_plane(self) -> tuple[Axis, Axis]:
        """(primary, secondary) axes of a plane perpendicular to this axis."""
        return PLANE_AXES[self]


class Vector3D(BaseModel):
    """Direction or displacement in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def component(self, axis: Axis) -> float:
        return getattr(self, axis.value)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-12:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def reversed(self) -> Vector3D:
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def component(self, axis: Axis) -> float:
        return getattr(self, axis.value)

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def offset(self, direction: Vector3D, distance: float = 1.0) -> Point3D:
        return Point3D(
            x=self.x + direction.x * distance,
            y=self.y + direction.y * distance,
            z=self.z + direction.z * distance,
        )

    def vector_to(self, other: Point3D) -> Vector3D:
        return Vector3D(x=other.x - self.x, y=other.y - self.y, z=other.z - self.z)


def point_from_components(components: dict[Axis, float]) -> Point3D:
    """Build a point from per-axis values; missing axes default to 0."""
    return Point3D(
        x=components.get(Axis.X, 0.0),
        y=components.get(Axis.Y, 0.0),
        z=components.get(Axis.Z, 0.0),
    )


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Transform(BaseModel):
    """Affine transform stored as a flat row-major 4x4 matrix."""
    model_config = ConfigDict(frozen=True)

    matrix: tuple[float, ...] = Field(default=_IDENTITY, min_length=16, max_length=16)

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float, dz: float) -> Transform:
        return cls(matrix=(
            1.0, 0.0, 0.0, dx,
            0.0, 1.0, 0.0, dy,
            0.0, 0.0, 1.0, dz,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def rotation(cls, axis: Axis, angle: float) -> Transform:
        """Rotation by ``angle`` radians about a coordinate axis through the origin."""
        c, s = math.cos(angle), math.sin(angle)
        if axis is Axis.X:
            rows = ((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c))
        elif axis is Axis.Y:
            rows = ((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c))
        else:
            rows = ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))
        return cls(matrix=(
            *rows[0], 0.0,
            *rows[1], 0.0,
            *rows[2], 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def __matmul__(self, other: Transform) -> Transform:
        a, b = self.matrix, other.matrix
        return Transform(matrix=tuple(
            sum(a[r * 4 + k] * b[k * 4 + c] for k in range(4))
            for r in range(4)
            for c in range(4)
        ))

    def apply_point(self, p: Point3D) -> Point3D:
        m = self.matrix
        return Point3D(
            x=m[0] * p.x + m[1] * p.y + m[2] * p.z + m[3],
            y=m[4] * p.x + m[5] * p.y + m[6] * p.z + m[7],
            z=m[8] * p.x + m[9] * p.y + m[10] * p.z + m[11],
        )

    def apply_vector(self, v: Vector3D) -> Vector3D:
        m = self.matrix
        return Vector3D(
            x=m[0] * v.x + m[1] * v.y + m[2] * v.z,
            y=m[4] * v.x + m[5] * v.y + m[6] * v.z,
            z=m[8] * v.x + m[9] * v.y + m[10] * v.z,
        )


class LocalFrame(BaseModel):
    """Origin plus three orthonormal axes.

    For framing members the cross-section lies in the x/y plane and the
    member extends along ``zaxis``.
    """
    model_config = ConfigDict(frozen=True)

    origin: Point3D
    xaxis: Vector3D
    yaxis: Vector3D
    zaxis: Vector3D

    @classmethod
    def world(cls, origin: Point3D) -> LocalFrame:
        return cls(origin=origin, xaxis=Axis.X.unit, yaxis=Axis.Y.unit, zaxis=Axis.Z.unit)

    def point_at(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Point3D:
        """Map local coordinates to world space."""
        return (
            self.origin
            .offset(self.xaxis, x)
            .offset(self.yaxis, y)
            .offset(self.zaxis, z)
        )

    def moved_to(self, origin: Point3D) -> LocalFrame:
        return self.model_copy(update={"origin": origin})

    def is_right_handed(self) -> bool:
        return self.xaxis.cross(self.yaxis).dot(self.zaxis) > 0

    def right_handed(self) -> LocalFrame:
        """Same frame with x reversed if needed. Safe for centred sections."""
        if self.is_right_handed():
            return self
        return self.model_copy(update={"xaxis": self.xaxis.reversed()})


_UNIT_VECTORS = {
    Axis.X: Vector3D(x=1.0, y=0.0, z=0.0),
    Axis.Y: Vector3D(x=0.0, y=1.0, z=0.0),
    Axis.Z: Vector3D(x=0.0, y=0.0, z=1.0),
}

# Side planes run along their primary axis; Z is always the vertical.
PLANE_AXES = {
    Axis.X: (Axis.Y, Axis.Z),
    Axis.Y: (Axis.X, Axis.Z),
    Axis.Z: (Axis.X, Axis.Y),
}
