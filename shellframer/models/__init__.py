from .geometry import Axis, Point3D, Vector3D, Transform, LocalFrame, PLANE_AXES, point_from_components
from .units import LengthUnit
from .solid import Solid, FaceEntity, EdgeEntity, LoopEntity, GeometryEntity
from .planes import PlaneDescriptor, PlanePair, PlaneClassification, ShellDimensions, Side
from .building import Wall, Opening, OpeningType, Corner, wall_name
from .framing import TimberMember, TimberFrame, MemberType, MemberTag, FrameLayout, FrameSummary
from .parameters import FramingParams, GenerationConfig
from .errors import (
    ErrorKind, FramingError, NotAPrismError, DimensionTooSmallError,
    NonRectangularOpeningError, OpeningOutOfBoundsError, OpeningTooSmallError,
    OpeningsOverlapError, DegenerateGeometryError, Result,
)
from .context import BuildingContext

__all__ = [
    "Axis", "Point3D", "Vector3D", "Transform", "LocalFrame", "PLANE_AXES", "point_from_components",
    "LengthUnit",
    "Solid", "FaceEntity", "EdgeEntity", "LoopEntity", "GeometryEntity",
    "PlaneDescriptor", "PlanePair", "PlaneClassification", "ShellDimensions", "Side",
    "Wall", "Opening", "OpeningType", "Corner", "wall_name",
    "TimberMember", "TimberFrame", "MemberType", "MemberTag", "FrameLayout", "FrameSummary",
    "FramingParams", "GenerationConfig",
    "ErrorKind", "FramingError", "NotAPrismError", "DimensionTooSmallError",
    "NonRectangularOpeningError", "OpeningOutOfBoundsError", "OpeningTooSmallError",
    "OpeningsOverlapError", "DegenerateGeometryError", "Result",
    "BuildingContext",
]
