"""Building element models: walls and their openings."""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel

from .geometry import Axis, LocalFrame, Point3D
from .planes import PlaneDescriptor, Side


def wall_name(axis: Axis, side: Side) -> str:
    return f"Wall {axis.value.upper()} {side.value.upper()}"


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class Opening(BaseModel):
    """An opening (window/door) in wall-local coordinates.

    ``horizontal_range`` / ``vertical_range`` are the rough opening after
    clearance and clamping; the ``raw_*`` ranges are the as-modelled cut-out.
    """
    type: OpeningType
    horizontal_range: tuple[float, float]
    vertical_range: tuple[float, float]
    raw_horizontal_range: tuple[float, float]
    raw_vertical_range: tuple[float, float]
    degenerate: bool = False

    @property
    def width(self) -> float:
        return self.horizontal_range[1] - self.horizontal_range[0]

    @property
    def sill(self) -> float:
        return self.vertical_range[0]

    @property
    def head(self) -> float:
        return self.vertical_range[1]


class Wall(BaseModel):
    """One vertical side of the shell with its own length/height frame."""
    axis: Axis
    side: Side
    frame: LocalFrame
    length: float
    height: float
    plane: PlaneDescriptor
    horizontal_origin: float    # World coordinate of the wall start along its primary axis
    base_elevation: float       # World coordinate of the wall base along its secondary axis
    openings: list[Opening] = []

    @property
    def name(self) -> str:
        return wall_name(self.axis, self.side)

    @property
    def primary_axis(self) -> Axis:
        return self.plane.primary_axis

    @property
    def secondary_axis(self) -> Axis:
        return self.plane.secondary_axis

    @property
    def horizontal_range(self) -> tuple[float, float]:
        return (0.0, self.length)

    @property
    def height_range(self) -> tuple[float, float]:
        return (0.0, self.height)

    @property
    def start(self) -> Point3D:
        return self.frame.origin

    @property
    def end(self) -> Point3D:
        return self.frame.origin.offset(self.frame.xaxis, self.length)

    def usable_openings(self) -> list[Opening]:
        return [o for o in self.openings if not o.degenerate]


class Corner(BaseModel):
    """A unique footprint corner shared by wall endpoints."""
    point: Point3D
    wall_names: list[str]
