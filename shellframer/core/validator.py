"""Pre-layout validation: fail fast with the first violated rule.

Rules, in order:
    1. the solid classified as a rectangular prism
    2. footprint length and width meet the minimum span
    3. height meets the minimum height
    4. every hole loop on a side plane is axis-aligned
    5. every hole lies within its plane
    6. every hole meets the minimum opening width and height
    7. no two holes on one plane overlap on both axes
"""

from __future__ import annotations
import itertools
import logging

from shellframer.core.classifier import edges_axis_aligned
from shellframer.models import (
    DimensionTooSmallError, FramingError, FramingParams,
    NonRectangularOpeningError, OpeningOutOfBoundsError, OpeningTooSmallError,
    OpeningsOverlapError, PlaneClassification, PlaneDescriptor, Result,
    ShellDimensions, wall_name,
)

logger = logging.getLogger(__name__)

Range = tuple[float, float]


def overlaps(a: Range, b: Range, tolerance: float) -> bool:
    return a[0] < b[1] - tolerance and b[0] < a[1] - tolerance


def within(inner: Range, outer: Range, tolerance: float) -> bool:
    return inner[0] >= outer[0] - tolerance and inner[1] <= outer[1] + tolerance


class Validator:
    def __init__(self, params: FramingParams | None = None) -> None:
        self.params = params or FramingParams()

    def validate(
        self,
        classification: Result[PlaneClassification],
        dimensions: ShellDimensions | None = None,
    ) -> Result[ShellDimensions]:
        """Check a classification; on success return the shell dimensions used."""
        if not classification.ok:
            return Result.failure(classification.error)  # type: ignore[arg-type]

        planes = classification.unwrap()
        dims = dimensions or planes.dimensions()
        try:
            self._check_dimensions(dims, planes.tolerance)
            for axis, side, plane in planes.side_planes():
                self._check_openings(wall_name(axis, side), plane)
        except FramingError as exc:
            logger.debug("Validation failed: %s", exc.message)
            return Result.failure(exc)
        return Result.success(dims)

    def _check_dimensions(self, dims: ShellDimensions, tol: float) -> None:
        p = self.params
        if dims.length < p.min_span - tol:
            raise DimensionTooSmallError("length", p.to_mm(p.min_span))
        if dims.width < p.min_span - tol:
            raise DimensionTooSmallError("width", p.to_mm(p.min_span))
        if dims.height < p.min_height - tol:
            raise DimensionTooSmallError("height", p.to_mm(p.min_height))

    def _check_openings(self, wall: str, plane: PlaneDescriptor) -> None:
        if not plane.inner_loops:
            return

        p = self.params
        tol = plane.tolerance
        primary, secondary = plane.primary_axis, plane.secondary_axis
        rectangles: list[tuple[Range, Range]] = []

        for loop in plane.inner_loops:
            if not edges_axis_aligned(loop, primary, secondary, tol):
                raise NonRectangularOpeningError(wall)

            p_values = [pt.component(primary) for pt in loop]
            s_values = [pt.component(secondary) for pt in loop]
            p_range = (min(p_values), max(p_values))
            s_range = (min(s_values), max(s_values))

            if not (within(p_range, plane.bounds[primary], tol)
                    and within(s_range, plane.bounds[secondary], tol)):
                raise OpeningOutOfBoundsError(wall)

            if p_range[1] - p_range[0] < p.min_opening_width - tol:
                raise OpeningTooSmallError(wall, "width", p.to_mm(p.min_opening_width))
            if s_range[1] - s_range[0] < p.min_opening_height - tol:
                raise OpeningTooSmallError(wall, "height", p.to_mm(p.min_opening_height))

            rectangles.append((p_range, s_range))

        for a, b in itertools.combinations(rectangles, 2):
            if overlaps(a[0], b[0], tol) and overlaps(a[1], b[1], tol):
                raise OpeningsOverlapError(wall)
