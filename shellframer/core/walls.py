"""Wall extraction: one wall per vertical side plane of a classified prism."""

from __future__ import annotations
import logging

from shellframer.models import (
    Axis, DegenerateGeometryError, LocalFrame, PlaneClassification,
    PlaneDescriptor, Side, Vector3D, Wall, point_from_components,
)

logger = logging.getLogger(__name__)


def wall_frame(
    plane: PlaneDescriptor,
    origin_components: dict[Axis, float],
    tolerance: float,
) -> LocalFrame:
    """Frame with x along the wall, y out of the shell and z up.

    Falls back to the plane normal when the in-plane axes do not span a
    plane, and flips y (recomputing z) when it points into the shell. z is
    kept vertical, so walls facing +X or -Y get a left-handed frame; see
    LocalFrame.right_handed.
    """
    primary, secondary = plane.axis.in_plane
    xaxis = primary.unit.normalized()
    zaxis = secondary.unit.normalized()

    yaxis = xaxis.cross(zaxis)
    if yaxis.length() <= tolerance:
        zaxis = plane.normal.cross(xaxis)
        if zaxis.length() <= tolerance:
            yaxis = plane.normal.normalized()
            zaxis = xaxis.cross(yaxis)
        else:
            yaxis = xaxis.cross(zaxis.normalized())

    yaxis = yaxis.normalized()
    zaxis = _complement(xaxis, yaxis, secondary.unit, tolerance)

    if yaxis.dot(plane.normal) < 0:
        yaxis = yaxis.reversed()
        zaxis = _complement(xaxis, yaxis, secondary.unit, tolerance)

    if zaxis.length() <= tolerance:
        raise DegenerateGeometryError(
            f"Cannot build a wall frame on plane {plane.axis.value.upper()}={plane.offset:.6g}"
        )

    return LocalFrame(
        origin=point_from_components(origin_components),
        xaxis=xaxis,
        yaxis=yaxis,
        zaxis=zaxis,
    )


def _complement(xaxis: Vector3D, yaxis: Vector3D, up: Vector3D, tolerance: float) -> Vector3D:
    zaxis = xaxis.cross(yaxis)
    if zaxis.length() <= tolerance:
        zaxis = yaxis.cross(xaxis)
    if zaxis.dot(up) < 0:
        zaxis = zaxis.reversed()
    return zaxis.normalized()


class WallExtractor:
    """Builds the four side walls (X and Y plane pairs); Z planes are floor and ceiling."""

    def extract(self, classification: PlaneClassification) -> list[Wall]:
        walls = [
            self._build_wall(axis, side, plane, classification.tolerance)
            for axis, side, plane in classification.side_planes()
        ]
        logger.debug("Extracted %d walls", len(walls))
        return walls

    def _build_wall(self, axis: Axis, side: Side, plane: PlaneDescriptor, tolerance: float) -> Wall:
        primary, secondary = axis.in_plane
        p0, p1 = plane.bounds[primary]
        s0, s1 = plane.bounds[secondary]

        frame = wall_frame(
            plane,
            {axis: plane.offset, primary: p0, secondary: s0},
            tolerance,
        )
        return Wall(
            axis=axis,
            side=side,
            frame=frame,
            length=p1 - p0,
            height=s1 - s0,
            plane=plane,
            horizontal_origin=p0,
            base_elevation=s0,
        )
