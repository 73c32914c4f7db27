"""Shared pytest fixtures: box-shaped shells with rectangular holes."""

from __future__ import annotations

import pytest

from shellframer.models import (
    Axis, FaceEntity, FramingParams, LengthUnit, Point3D, Side, Solid,
    point_from_components,
)

# (primary_min, primary_max, secondary_min, secondary_max) in world coordinates
Rect = tuple[float, float, float, float]


def rect_loop(axis: Axis, offset: float, p0: float, p1: float, s0: float, s1: float) -> list[Point3D]:
    primary, secondary = axis.in_plane
    return [
        point_from_components({axis: offset, primary: pv, secondary: sv})
        for pv, sv in ((p0, s0), (p1, s0), (p1, s1), (p0, s1))
    ]


def box_faces(
    x: tuple[float, float] = (0.0, 1.0),
    y: tuple[float, float] = (0.0, 1.0),
    z: tuple[float, float] = (0.0, 1.0),
    holes: dict[tuple[Axis, Side], list] | None = None,
) -> list[FaceEntity]:
    """Six outward-facing faces of an axis-aligned box.

    ``holes`` maps (axis, side) to hole rectangles or ready-made point loops.
    """
    holes = holes or {}
    bounds = {Axis.X: x, Axis.Y: y, Axis.Z: z}
    faces = []
    for axis in Axis:
        primary, secondary = axis.in_plane
        for side, sign, index in ((Side.MIN, -1.0, 0), (Side.MAX, 1.0, 1)):
            offset = bounds[axis][index]
            outer = rect_loop(axis, offset, *bounds[primary], *bounds[secondary])
            inner = [
                hole if isinstance(hole, list) else rect_loop(axis, offset, *hole)
                for hole in holes.get((axis, side), [])
            ]
            faces.append(FaceEntity(normal=axis.unit * sign, loops=[outer, *inner]))
    return faces


@pytest.fixture
def make_box():
    return box_faces


@pytest.fixture
def mm_params() -> FramingParams:
    return FramingParams.for_unit(LengthUnit.MM)


@pytest.fixture
def shell_faces() -> list[FaceEntity]:
    """4000 x 3000 mm footprint, 2400 mm high, no openings."""
    return box_faces(x=(0.0, 4000.0), y=(0.0, 3000.0), z=(0.0, 2400.0))


@pytest.fixture
def shell_with_openings() -> Solid:
    """Door on the X-min wall, window on the Y-max wall (mm)."""
    faces = box_faces(
        x=(0.0, 4000.0), y=(0.0, 3000.0), z=(0.0, 2400.0),
        holes={
            (Axis.X, Side.MIN): [(1000.0, 1900.0, 0.0, 2100.0)],
            (Axis.Y, Side.MAX): [(500.0, 1700.0, 900.0, 2100.0)],
        },
    )
    return Solid.from_faces(faces)
