"""Plane descriptors produced by the plane classifier."""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .geometry import Axis, Point3D, Vector3D


class Side(str, Enum):
    MIN = "min"
    MAX = "max"


class PlaneDescriptor(BaseModel):
    """One side of the prism: a rectangle perpendicular to ``axis``, with holes."""
    model_config = ConfigDict(frozen=True)

    axis: Axis
    offset: float
    normal: Vector3D
    outer_loop: tuple[Point3D, ...]
    inner_loops: tuple[tuple[Point3D, ...], ...] = ()
    bounds: dict[Axis, tuple[float, float]]
    tolerance: float

    @property
    def primary_axis(self) -> Axis:
        return self.axis.in_plane[0]

    @property
    def secondary_axis(self) -> Axis:
        return self.axis.in_plane[1]


class PlanePair(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: PlaneDescriptor
    max: PlaneDescriptor

    def get(self, side: Side) -> PlaneDescriptor:
        return self.min if side is Side.MIN else self.max


class ShellDimensions(BaseModel):
    """Overall extents of the shell along the world axes."""
    model_config = ConfigDict(frozen=True)

    length: float   # X
    width: float    # Y
    height: float   # Z


class PlaneClassification(BaseModel):
    """Three pairs of opposing planes, one pair per axis."""
    model_config = ConfigDict(frozen=True)

    x: PlanePair
    y: PlanePair
    z: PlanePair
    tolerance: float

    def pair(self, axis: Axis) -> PlanePair:
        return getattr(self, axis.value)

    def side_planes(self) -> list[tuple[Axis, Side, PlaneDescriptor]]:
        """The four vertical planes in wall order: X min, X max, Y min, Y max."""
        return [
            (axis, side, self.pair(axis).get(side))
            for axis in (Axis.X, Axis.Y)
            for side in (Side.MIN, Side.MAX)
        ]

    def dimensions(self) -> ShellDimensions:
        return ShellDimensions(
            length=self.x.max.offset - self.x.min.offset,
            width=self.y.max.offset - self.y.min.offset,
            height=self.z.max.offset - self.z.min.offset,
        )
