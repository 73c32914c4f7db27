"""Plane classification: prove a face set is an axis-aligned box.

Faces are moved to world space, snapped to the coordinate axis their
normal is parallel to, and grouped by offset into coplanar plane groups.
A valid prism has exactly two valid groups per axis.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field

from shellframer.models import (
    Axis, FaceEntity, FramingParams, NotAPrismError, PlaneClassification,
    PlaneDescriptor, PlanePair, Point3D, Result, Transform, Vector3D,
)

logger = logging.getLogger(__name__)


def edges_axis_aligned(
    loop: list[Point3D] | tuple[Point3D, ...],
    primary: Axis,
    secondary: Axis,
    tolerance: float,
) -> bool:
    """True when every edge of the closed loop changes exactly one in-plane coordinate."""
    if len(loop) < 2:
        return False
    for i, a in enumerate(loop):
        b = loop[(i + 1) % len(loop)]
        moves_primary = abs(b.component(primary) - a.component(primary)) > tolerance
        moves_secondary = abs(b.component(secondary) - a.component(secondary)) > tolerance
        if moves_primary == moves_secondary:
            return False
    return True


def distinct_values(values: list[float], tolerance: float) -> list[float]:
    """Sorted values with near-duplicates collapsed onto the first seen."""
    unique: list[float] = []
    for v in sorted(values):
        if not unique or v - unique[-1] > tolerance:
            unique.append(v)
    return unique


def bounding_diagonal(points: list[Point3D]) -> float:
    if not points:
        return 0.0
    spans = [
        max(p.component(axis) for p in points) - min(p.component(axis) for p in points)
        for axis in Axis
    ]
    return math.sqrt(sum(s * s for s in spans))


@dataclass
class _WorldFace:
    axis: Axis
    normal: Vector3D
    offset: float
    outer: list[Point3D]
    inner: list[list[Point3D]]


@dataclass
class _PlaneGroup:
    axis: Axis
    offset: float
    normal_sum: Vector3D
    faces: list[_WorldFace] = field(default_factory=list)

    def add(self, face: _WorldFace) -> None:
        self.faces.append(face)
        self.normal_sum = self.normal_sum + face.normal


class PlaneClassifier:
    """Groups a solid's faces into three pairs of opposing axis-aligned planes."""

    def __init__(self, params: FramingParams | None = None) -> None:
        self.params = params or FramingParams()

    def classify(
        self,
        faces: list[FaceEntity],
        transform: Transform | None = None,
    ) -> Result[PlaneClassification]:
        try:
            return Result.success(self._classify(faces, transform or Transform.identity()))
        except NotAPrismError as exc:
            logger.debug("Classification failed: %s", exc.reason)
            return Result.failure(exc)

    def _classify(self, faces: list[FaceEntity], transform: Transform) -> PlaneClassification:
        if not faces:
            raise NotAPrismError("no faces")

        world_loops = [
            [[transform.apply_point(p) for p in loop] for loop in face.loops]
            for face in faces
        ]
        all_points = [p for loops in world_loops for loop in loops for p in loop]
        tolerance = self.params.tolerance_for(bounding_diagonal(all_points))

        world_faces = [
            self._world_face(index, face, loops, transform)
            for index, (face, loops) in enumerate(zip(faces, world_loops))
        ]

        groups: dict[Axis, list[_PlaneGroup]] = {axis: [] for axis in Axis}
        for wf in world_faces:
            self._assign_group(groups[wf.axis], wf, tolerance)

        pairs: dict[Axis, PlanePair] = {}
        for axis in Axis:
            axis_groups = groups[axis]
            if len(axis_groups) != 2:
                raise NotAPrismError(
                    f"expected 2 planes perpendicular to {axis.value.upper()}, found {len(axis_groups)}"
                )
            low, high = sorted(axis_groups, key=lambda g: g.offset)
            if high.offset - low.offset <= tolerance:
                raise NotAPrismError(f"zero extent along {axis.value.upper()}")
            pairs[axis] = PlanePair(
                min=self._describe(low, tolerance),
                max=self._describe(high, tolerance),
            )
            logger.debug(
                "Axis %s: planes at %.6g and %.6g",
                axis.value, low.offset, high.offset,
            )

        return PlaneClassification(
            x=pairs[Axis.X], y=pairs[Axis.Y], z=pairs[Axis.Z], tolerance=tolerance,
        )

    def _world_face(
        self,
        index: int,
        face: FaceEntity,
        loops: list[list[Point3D]],
        transform: Transform,
    ) -> _WorldFace:
        normal = transform.apply_vector(face.normal).normalized()
        if normal.length() == 0.0:
            raise NotAPrismError(f"face {index} has no normal")

        axis = max(Axis, key=lambda a: abs(normal.dot(a.unit)))
        if 1.0 - abs(normal.dot(axis.unit)) > self.params.angular_tolerance:
            raise NotAPrismError(f"face {index} is not parallel to a coordinate plane")

        if not 0 <= face.outer_loop < len(loops):
            raise NotAPrismError(f"face {index} has no outer loop")
        outer = loops[face.outer_loop]
        if not outer:
            raise NotAPrismError(f"face {index} has an empty outer loop")
        offset = sum(p.component(axis) for p in outer) / len(outer)
        inner = [loop for i, loop in enumerate(loops) if i != face.outer_loop]
        return _WorldFace(axis=axis, normal=normal, offset=offset, outer=outer, inner=inner)

    def _assign_group(self, groups: list[_PlaneGroup], face: _WorldFace, tolerance: float) -> None:
        for group in groups:
            if abs(group.offset - face.offset) <= tolerance:
                group.add(face)
                return
        group = _PlaneGroup(axis=face.axis, offset=face.offset, normal_sum=Vector3D(x=0.0, y=0.0, z=0.0))
        group.add(face)
        groups.append(group)

    def _describe(self, group: _PlaneGroup, tolerance: float) -> PlaneDescriptor:
        """Validate a plane group and turn it into a descriptor."""
        axis = group.axis
        primary, secondary = axis.in_plane
        label = f"plane {axis.value.upper()}={group.offset:.6g}"

        outer_points = [p for face in group.faces for p in face.outer]
        for p in outer_points:
            if abs(p.component(axis) - group.offset) > tolerance:
                raise NotAPrismError(f"{label} is not flat")

        for face in group.faces:
            if not edges_axis_aligned(face.outer, primary, secondary, tolerance):
                raise NotAPrismError(f"{label} has a non-rectangular boundary")

        p_values = distinct_values([p.component(primary) for p in outer_points], tolerance)
        s_values = distinct_values([p.component(secondary) for p in outer_points], tolerance)
        if len(p_values) != 2 or len(s_values) != 2:
            raise NotAPrismError(f"{label} is not a single rectangle")

        for pv in p_values:
            for sv in s_values:
                found = any(
                    abs(p.component(primary) - pv) <= tolerance
                    and abs(p.component(secondary) - sv) <= tolerance
                    for p in outer_points
                )
                if not found:
                    raise NotAPrismError(f"{label} is missing a corner")

        normal = group.normal_sum.normalized()
        if normal.length() == 0.0:
            raise NotAPrismError(f"{label} has opposing coincident faces")

        def corner_point(pv: float, sv: float) -> Point3D:
            values = {axis: group.offset, primary: pv, secondary: sv}
            return Point3D(x=values[Axis.X], y=values[Axis.Y], z=values[Axis.Z])

        (p0, p1), (s0, s1) = p_values, s_values
        outer_loop = (
            corner_point(p0, s0),
            corner_point(p1, s0),
            corner_point(p1, s1),
            corner_point(p0, s1),
        )
        inner_loops = tuple(
            tuple(loop) for face in group.faces for loop in face.inner
        )
        return PlaneDescriptor(
            axis=axis,
            offset=group.offset,
            normal=normal,
            outer_loop=outer_loop,
            inner_loops=inner_loops,
            bounds={primary: (p0, p1), secondary: (s0, s1)},
            tolerance=tolerance,
        )
